"""Storage port - Abstraction for persisting the road network.

Implementation: adapters/storage/text_table_repository.py
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from ..network.model import RoadNetwork


class NetworkRepositoryPort(Protocol):
    """Port for loading and saving the city and road tables."""

    def load(self, network: RoadNetwork) -> None:
        """Repopulate ``network`` from storage.

        A missing table leaves the corresponding structure as it was
        (empty at startup); it is not an error.
        """
        ...

    def save_cities(self, network: RoadNetwork) -> Path:
        """Write the city table, overwriting previous content.

        Returns:
            The path written.

        Raises:
            PersistenceError: If the table cannot be written.
        """
        ...

    def save_roads(self, network: RoadNetwork) -> Path:
        """Write the road table, overwriting previous content."""
        ...

    def save(self, network: RoadNetwork) -> List[Path]:
        """Write both tables; both are attempted even if one fails."""
        ...

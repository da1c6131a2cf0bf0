"""Immutable domain models for the road network registry.

Records are frozen dataclasses with slots; an "update" replaces the
stored record with a modified copy (``dataclasses.replace``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class City:
    """A named location with a stable index.

    Attributes:
        index: Sequential identifier, starting at 1, never reused
        name: Display name, unique case-insensitively
    """

    index: int
    name: str

    @property
    def key(self) -> str:
        """Case-folded name used for uniqueness and lookup."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Road:
    """An undirected connection between two distinct cities.

    Attributes:
        city1: Name of the first city, as given when the road was added
        city2: Name of the second city
        budget: Non-negative budget assigned to the road
    """

    city1: str
    city2: str
    budget: float = 0.0

    @property
    def label(self) -> str:
        """Return the ``"city1 - city2"`` label used in tables and files."""
        return f"{self.city1} - {self.city2}"

    def involves(self, name: str) -> bool:
        return name in (self.city1, self.city2)

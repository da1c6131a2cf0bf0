"""The network aggregate: a city directory and its road graph.

A RoadNetwork is created explicitly (empty or from storage) and handed to
whoever needs it; there is no module-level state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ..domain.errors import NotConnectedError
from ..domain.models import City, Road
from .cities import CityDirectory
from .roads import RoadGraph


@dataclass
class RoadNetwork:
    """Cities plus the roads between them.

    Methods taking a ``token`` accept either a textual index or a city
    name, as typed by the operator.

    Attributes:
        cities: The city directory
        roads: The road graph, keyed by city index
    """

    cities: CityDirectory = field(default_factory=CityDirectory)
    roads: RoadGraph = field(default_factory=RoadGraph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def with_capacity(cls, max_cities: int) -> RoadNetwork:
        return cls(cities=CityDirectory(capacity=max_cities))

    @property
    def size(self) -> int:
        """Side length of the matrix views (highest assigned index)."""
        return self.cities.next_index - 1

    def add_city(self, name: str) -> City:
        city = self.cities.add(name)
        self._logger.info("City added", extra={"index": city.index, "city": city.name})
        return city

    def connect(self, token_a: str, token_b: str) -> Road:
        """Add a road between two cities given by index or name.

        Raises:
            CityNotFoundError: If either token does not resolve.
            SelfLoopError: If both tokens name the same city.
            AlreadyConnectedError: If the road already exists.
        """
        index_a = self.cities.resolve_or_raise(token_a)
        index_b = self.cities.resolve_or_raise(token_b)
        road = self.roads.connect(
            index_a,
            index_b,
            self.cities.name_of(index_a),
            self.cities.name_of(index_b),
        )
        self._logger.info("Road added", extra={"road": road.label})
        return road

    def require_road(self, token_a: str, token_b: str) -> Tuple[int, int]:
        """Resolve two tokens and check that a road joins them.

        Returns:
            The two city indices.

        Raises:
            CityNotFoundError: If either token does not resolve.
            NotConnectedError: If there is no road between them.
        """
        index_a = self.cities.resolve_or_raise(token_a)
        index_b = self.cities.resolve_or_raise(token_b)
        if not self.roads.is_connected(index_a, index_b):
            raise NotConnectedError(
                "No road exists between these cities",
                city1=self.cities.name_of(index_a),
                city2=self.cities.name_of(index_b),
            )
        return index_a, index_b

    def set_budget(self, token_a: str, token_b: str, amount: float) -> Road:
        index_a, index_b = self.require_road(token_a, token_b)
        road = self.roads.set_budget(index_a, index_b, amount)
        self._logger.info(
            "Budget assigned", extra={"road": road.label, "budget": road.budget}
        )
        return road

    def rename_city(self, index: int, new_name: str) -> City:
        """Rename a city and carry the new name into every road using it."""
        old_name = self.cities.name_of(index)
        city = self.cities.rename(index, new_name)
        changed = self.roads.rename_participant(old_name, city.name)
        self._logger.info(
            "City renamed",
            extra={
                "index": index,
                "old_name": old_name,
                "new_name": city.name,
                "roads_updated": changed,
            },
        )
        return city

    def neighbors(self, index: int) -> List[Tuple[str, float]]:
        return self.roads.neighbors(index, self.cities.name_of)

    def adjacency_matrix(self) -> List[List[bool]]:
        return self.roads.adjacency_matrix(self.size)

    def budget_matrix(self) -> List[List[float]]:
        return self.roads.budget_matrix(self.size)

    def clear(self) -> None:
        self.roads.clear()
        self.cities.clear()

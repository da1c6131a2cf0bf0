"""Road graph: one budgeted edge per unordered pair of city indices.

The edge map is the only stored form of the graph. Adjacency and budget
matrices are derived from it on request, so the two can never disagree.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Tuple

from ..domain.errors import AlreadyConnectedError, NotConnectedError, SelfLoopError
from ..domain.models import Road

EdgeKey = Tuple[int, int]


def edge_key(index_a: int, index_b: int) -> EdgeKey:
    return (index_a, index_b) if index_a <= index_b else (index_b, index_a)


@dataclass
class RoadGraph:
    """Undirected, budgeted road graph keyed by city index."""

    _edges: Dict[EdgeKey, Road] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._edges)

    def is_connected(self, index_a: int, index_b: int) -> bool:
        return edge_key(index_a, index_b) in self._edges

    def connect(self, index_a: int, index_b: int, name_a: str, name_b: str) -> Road:
        """Add a road with a zero budget.

        Raises:
            SelfLoopError: If both indices are the same city.
            AlreadyConnectedError: If the pair already has a road.
        """
        if index_a == index_b:
            raise SelfLoopError(
                "Cannot create road between the same city", city=name_a
            )
        key = edge_key(index_a, index_b)
        if key in self._edges:
            raise AlreadyConnectedError(
                "Road already exists between these cities",
                city1=name_a,
                city2=name_b,
            )
        road = Road(city1=name_a, city2=name_b, budget=0.0)
        self._edges[key] = road
        self._logger.debug("Road added", extra={"road": road.label})
        return road

    def set_budget(self, index_a: int, index_b: int, amount: float) -> Road:
        """Assign a budget to an existing road.

        Raises:
            NotConnectedError: If there is no road between the pair.
            ValueError: If the amount is negative or not finite.
        """
        key = edge_key(index_a, index_b)
        road = self._edges.get(key)
        if road is None:
            raise NotConnectedError(
                "No road exists between these cities",
                city1=str(index_a),
                city2=str(index_b),
            )
        if not math.isfinite(amount) or amount < 0:
            raise ValueError(f"Budget must be a non-negative number, got {amount}")
        updated = replace(road, budget=float(amount))
        self._edges[key] = updated
        self._logger.debug(
            "Budget assigned", extra={"road": updated.label, "budget": updated.budget}
        )
        return updated

    def budget_between(self, index_a: int, index_b: int) -> float:
        road = self._edges.get(edge_key(index_a, index_b))
        return road.budget if road is not None else 0.0

    def rename_participant(self, old_name: str, new_name: str) -> int:
        """Rewrite ``old_name`` to ``new_name`` in every road that uses it.

        Returns:
            Number of roads that changed.
        """
        changed = 0
        for key, road in self._edges.items():
            if not road.involves(old_name):
                continue
            self._edges[key] = replace(
                road,
                city1=new_name if road.city1 == old_name else road.city1,
                city2=new_name if road.city2 == old_name else road.city2,
            )
            changed += 1
        return changed

    def neighbors(
        self, index: int, name_of: Callable[[int], str]
    ) -> List[Tuple[str, float]]:
        """List ``(neighbor name, budget)`` pairs in ascending neighbor index."""
        found: List[Tuple[int, float]] = []
        for (a, b), road in self._edges.items():
            if a == index:
                found.append((b, road.budget))
            elif b == index:
                found.append((a, road.budget))
        found.sort()
        return [(name_of(other), budget) for other, budget in found]

    def roads(self) -> List[Road]:
        """Return all roads in the order they were added."""
        return list(self._edges.values())

    def adjacency_matrix(self, size: int) -> List[List[bool]]:
        """Square boolean matrix indexed by ``city.index - 1``."""
        matrix = [[False] * size for _ in range(size)]
        for a, b in self._edges:
            if a <= size and b <= size:
                matrix[a - 1][b - 1] = True
                matrix[b - 1][a - 1] = True
        return matrix

    def budget_matrix(self, size: int) -> List[List[float]]:
        """Square budget matrix; non-adjacent cells read 0.0."""
        matrix = [[0.0] * size for _ in range(size)]
        for (a, b), road in self._edges.items():
            if a <= size and b <= size:
                matrix[a - 1][b - 1] = road.budget
                matrix[b - 1][a - 1] = road.budget
        return matrix

    def clear(self) -> None:
        self._edges.clear()

"""City directory: ordered (index, name) records with lookup by either key."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Optional

from ..domain.errors import (
    CapacityExceededError,
    CityNotFoundError,
    DuplicateCityError,
    InvalidCityNameError,
)
from ..domain.models import City

_SPACED_HYPHEN = re.compile(r"\s-|-\s")


def normalize_city_name(raw: str) -> str:
    """Trim surrounding whitespace and validate a city name.

    Args:
        raw: The name as typed or read from disk.

    Returns:
        The trimmed, case-preserved name.

    Raises:
        InvalidCityNameError: If the name is empty, contains a digit, or
            has a hyphen next to whitespace (reserved for road labels).
    """
    name = raw.strip()
    if not name:
        raise InvalidCityNameError("City name cannot be empty", name=raw)
    if any(ch.isdigit() for ch in name):
        raise InvalidCityNameError("City name cannot contain numbers", name=name)
    if _SPACED_HYPHEN.search(name):
        raise InvalidCityNameError(
            "City name cannot contain a hyphen next to a space", name=name
        )
    return name


@dataclass
class CityDirectory:
    """Insertion-ordered set of cities.

    Indices are assigned as ``max(existing) + 1`` and never change, even
    when a city is renamed. Names are unique case-insensitively.

    Attributes:
        capacity: Maximum number of cities the directory accepts
    """

    capacity: int = 20

    _cities: Dict[int, City] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(list(self._cities.values()))

    @property
    def next_index(self) -> int:
        return max(self._cities, default=0) + 1

    @property
    def remaining_capacity(self) -> int:
        return max(self.capacity - len(self._cities), 0)

    def add(self, name: str) -> City:
        """Register a new city under the next sequential index.

        Only the in-memory directory grows; persistence is requested
        separately.

        Raises:
            InvalidCityNameError: If the name is empty or contains a digit.
            DuplicateCityError: If the name is already taken.
            CapacityExceededError: If the directory is full.
        """
        clean = normalize_city_name(name)
        if self.is_name_taken(clean):
            raise DuplicateCityError(f"City '{clean}' already exists", name=clean)
        if self.remaining_capacity == 0:
            raise CapacityExceededError(
                f"City capacity ({self.capacity}) reached",
                capacity=self.capacity,
            )
        city = City(index=self.next_index, name=clean)
        self._cities[city.index] = city
        self._logger.debug("City added", extra={"index": city.index, "city": city.name})
        return city

    def restore(self, index: int, name: str) -> City:
        """Insert a city with an explicit index, as read from storage.

        Raises:
            ValueError: If the index is not positive.
            InvalidCityNameError: If the name breaks the naming rules.
            DuplicateCityError: If the index or the name is already taken.
        """
        if index < 1:
            raise ValueError(f"City index must be positive, got {index}")
        clean = normalize_city_name(name)
        if index in self._cities:
            raise DuplicateCityError(f"City index {index} already exists", name=clean)
        if self.is_name_taken(clean):
            raise DuplicateCityError(f"City '{clean}' already exists", name=clean)
        city = City(index=index, name=clean)
        self._cities[index] = city
        return city

    def get(self, index: int) -> Optional[City]:
        return self._cities.get(index)

    def name_of(self, index: int) -> str:
        city = self._cities.get(index)
        if city is None:
            raise CityNotFoundError(f"No city with index {index}", token=str(index))
        return city.name

    def is_name_taken(self, name: str, exclude_index: Optional[int] = None) -> bool:
        """Check whether ``name`` matches an existing city, ignoring case.

        Args:
            name: Candidate name (compared after trimming).
            exclude_index: A city to ignore, e.g. the one being renamed.
        """
        key = name.strip().lower()
        return any(
            city.key == key
            for city in self._cities.values()
            if city.index != exclude_index
        )

    def resolve(self, token: str) -> Optional[int]:
        """Find a city by textual index or by name.

        Tokens made of decimal digits are always treated as indices; any
        other token is matched against names case-insensitively.

        Returns:
            The city's index, or None if nothing matches.
        """
        token = token.strip()
        if not token:
            return None
        if token.isdecimal():
            index = int(token)
            return index if index in self._cities else None
        key = token.lower()
        for city in self._cities.values():
            if city.key == key:
                return city.index
        return None

    def resolve_or_raise(self, token: str) -> int:
        """Like resolve(), but raises CityNotFoundError on a miss."""
        index = self.resolve(token)
        if index is None:
            raise CityNotFoundError(f"City not found: {token.strip()}", token=token)
        return index

    def rename(self, index: int, new_name: str) -> City:
        """Replace the name of the city at ``index``.

        The city itself may be renamed to a different casing of its own
        name. Roads referencing the old name are not touched here.

        Returns:
            The updated city record.
        """
        current = self._cities.get(index)
        if current is None:
            raise CityNotFoundError(f"No city with index {index}", token=str(index))
        clean = normalize_city_name(new_name)
        if self.is_name_taken(clean, exclude_index=index):
            raise DuplicateCityError(f"City '{clean}' already exists", name=clean)
        updated = replace(current, name=clean)
        self._cities[index] = updated
        self._logger.debug(
            "City renamed",
            extra={"index": index, "old_name": current.name, "new_name": clean},
        )
        return updated

    def list_cities(self) -> List[City]:
        """Return all cities in insertion order."""
        return list(self._cities.values())

    def clear(self) -> None:
        self._cities.clear()

"""Typed domain errors for the road network registry.

Command handlers catch these and report them to the operator as a single
line; none of them is fatal to the menu loop.

All errors inherit from RoadNetworkError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadNetworkError(Exception):
    """Base error for the road network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidCityNameError(RoadNetworkError):
    """City name is empty or contains digits.

    Attributes:
        name: The rejected name as given
    """

    name: str = ""


@dataclass
class DuplicateCityError(RoadNetworkError):
    """A city with the same name (case-insensitive) or index already exists.

    Attributes:
        name: The conflicting name
    """

    name: str = ""


@dataclass
class CapacityExceededError(RoadNetworkError):
    """The directory already holds the maximum number of cities.

    Attributes:
        capacity: The configured maximum
    """

    capacity: int = 0


@dataclass
class CityNotFoundError(RoadNetworkError):
    """No city matches the given index or name.

    Attributes:
        token: The lookup token that failed
    """

    token: str = ""


@dataclass
class SelfLoopError(RoadNetworkError):
    """A road was requested from a city to itself."""

    city: str = ""


@dataclass
class AlreadyConnectedError(RoadNetworkError):
    """A road already exists between the two cities."""

    city1: str = ""
    city2: str = ""


@dataclass
class NotConnectedError(RoadNetworkError):
    """No road exists between the two cities."""

    city1: str = ""
    city2: str = ""


@dataclass
class PersistenceError(RoadNetworkError):
    """A data file could not be written or read.

    Attributes:
        file_path: Path to the file involved
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RoadNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""

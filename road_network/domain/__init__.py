"""Domain layer - Core records and errors.

This module contains the immutable City/Road records and the typed
errors used throughout the application. No external dependencies.
"""

from .errors import (
    AlreadyConnectedError,
    CapacityExceededError,
    CityNotFoundError,
    ConfigurationError,
    DuplicateCityError,
    InvalidCityNameError,
    NotConnectedError,
    PersistenceError,
    RoadNetworkError,
    SelfLoopError,
)
from .models import City, Road

__all__ = [
    # Models
    "City",
    "Road",
    # Errors
    "RoadNetworkError",
    "InvalidCityNameError",
    "DuplicateCityError",
    "CapacityExceededError",
    "CityNotFoundError",
    "SelfLoopError",
    "AlreadyConnectedError",
    "NotConnectedError",
    "PersistenceError",
    "ConfigurationError",
]

"""Top-level package for the road network registry.

A terminal record keeper for cities, the roads between them and the
budget assigned to each road, persisted as two fixed-width text tables.
"""

from .domain import City, Road
from .network import CityDirectory, RoadGraph, RoadNetwork

__all__ = ["City", "Road", "CityDirectory", "RoadGraph", "RoadNetwork"]

"""In-memory representation of the road network.

This subpackage holds the city directory, the road graph and the
RoadNetwork aggregate that ties them together.
"""

from .cities import CityDirectory, normalize_city_name
from .model import RoadNetwork
from .roads import RoadGraph, edge_key

__all__ = ["CityDirectory", "RoadGraph", "RoadNetwork", "edge_key", "normalize_city_name"]

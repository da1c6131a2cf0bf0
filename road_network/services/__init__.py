"""Services layer - Application orchestration.

Available services:
- NetworkService: Menu command handlers over a RoadNetwork
"""

from .network_service import NetworkService

__all__ = ["NetworkService"]

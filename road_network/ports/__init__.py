"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and its
adapters, so storage and terminal I/O can be swapped in tests.
"""

from .console import ConsolePort
from .storage import NetworkRepositoryPort

__all__ = ["ConsolePort", "NetworkRepositoryPort"]

"""Storage adapters - Implementations of the NetworkRepositoryPort.

Available implementations:
- FixedWidthTableRepository: cities.txt / roads.txt fixed-width tables
"""

from .text_table_repository import FixedWidthTableRepository

__all__ = ["FixedWidthTableRepository"]

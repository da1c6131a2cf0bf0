"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Data files (fixed-width text tables)
- The operator's terminal (or a scripted stand-in)
"""

"""Operator input handling.

Validated readers for integers, budgets and city names.
"""

from .prompts import Prompter

__all__ = ["Prompter"]

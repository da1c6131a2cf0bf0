"""Validated operator input.

Each reader keeps prompting until the answer satisfies its constraint;
validation failures are reported on the console and never escape this
module. There is no retry limit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..domain.errors import InvalidCityNameError
from ..network.cities import CityDirectory, normalize_city_name
from ..ports.console import ConsolePort


def _format_bound(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


@dataclass
class Prompter:
    """Re-prompting readers on top of a console.

    Attributes:
        console: Where prompts are shown and answers read from
    """

    console: ConsolePort

    def read_text(self, prompt: str) -> str:
        return self.console.read_line(prompt).strip()

    def read_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """Read an integer in ``[minimum, maximum]``."""
        while True:
            raw = self.console.read_line(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                value = None
            if value is not None and minimum <= value <= maximum:
                return value
            self.console.write(
                f"Invalid input. Please enter a number between {minimum} and {maximum}."
            )

    def read_float(self, prompt: str, minimum: float) -> float:
        """Read a finite real number ``>= minimum``."""
        while True:
            raw = self.console.read_line(prompt).strip()
            try:
                value = float(raw)
            except ValueError:
                value = math.nan
            if math.isfinite(value) and value >= minimum:
                return value
            self.console.write(
                f"Invalid input. Please enter a number >= {_format_bound(minimum)}."
            )

    def read_city_name(
        self,
        prompt: str,
        cities: CityDirectory,
        exclude_index: Optional[int] = None,
    ) -> str:
        """Read a new city name that is non-empty, digit-free and unused.

        Args:
            prompt: Text shown before each attempt.
            cities: Directory checked for case-insensitive duplicates.
            exclude_index: City allowed to keep its own name (when renaming).

        Returns:
            The trimmed, case-preserved name.
        """
        while True:
            raw = self.console.read_line(prompt)
            try:
                name = normalize_city_name(raw)
            except InvalidCityNameError as e:
                self.console.write(f"Error: {e.message}.")
                continue
            if cities.is_name_taken(name, exclude_index=exclude_index):
                self.console.write(f"Error: City '{name}' already exists.")
                continue
            return name

"""Terminal console adapter backed by the built-in input/print."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TerminalConsole:
    """Interactive console on stdin/stdout."""

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def write(self, text: str = "") -> None:
        print(text)

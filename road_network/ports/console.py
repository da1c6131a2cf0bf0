"""Console port - Line-oriented operator interaction.

Implementations:
- adapters/console/terminal.py (TerminalConsole) - Production
- adapters/console/scripted.py (ScriptedConsole) - Testing
"""

from __future__ import annotations

from typing import Protocol


class ConsolePort(Protocol):
    """Port for reading operator input and printing results."""

    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` and return one line of input (without newline).

        Raises:
            EOFError: If no more input is available.
        """
        ...

    def write(self, text: str = "") -> None:
        """Print ``text`` followed by a newline."""
        ...

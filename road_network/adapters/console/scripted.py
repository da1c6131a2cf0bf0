"""Scripted console for tests and batch runs.

Answers are consumed in order; everything printed (prompts included) is
captured so a session can be asserted on afterwards.

Example:
    console = ScriptedConsole(["1", "2", "Kigali", "Huye", "9"])
    run_menu(NetworkService(network, repository, console))
    assert "City 'Huye' added with index 2." in console.lines
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List


@dataclass
class ScriptedConsole:
    """Console fed from a list of pre-recorded answers.

    Attributes:
        answers: Lines returned by read_line, in order
        lines: Every prompt and printed line, in order
    """

    answers: Iterable[str] = ()
    lines: List[str] = field(default_factory=list)
    _pending: Deque[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._pending = deque(self.answers)

    def read_line(self, prompt: str) -> str:
        self.lines.append(prompt)
        if not self._pending:
            raise EOFError("scripted input exhausted")
        return self._pending.popleft()

    def write(self, text: str = "") -> None:
        self.lines.extend(text.split("\n"))

    @property
    def remaining(self) -> int:
        return len(self._pending)

"""Console adapters - Implementations of the ConsolePort.

Available implementations:
- TerminalConsole: stdin/stdout
- ScriptedConsole: Pre-recorded answers with captured output (testing)
"""

from .scripted import ScriptedConsole
from .terminal import TerminalConsole

__all__ = ["ScriptedConsole", "TerminalConsole"]

"""Terminal surfaces the session reads input from and writes output to."""

from termsession.terminal.base import TerminalError, TerminalSurface
from termsession.terminal.buffer import ScreenBuffer
from termsession.terminal.console import ConsoleTerminal

__all__ = ["ConsoleTerminal", "ScreenBuffer", "TerminalError", "TerminalSurface"]

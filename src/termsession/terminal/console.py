"""Terminal surface writing to a text stream (stdout by default)."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from termsession.terminal.base import TerminalError, TerminalSurface

logger = logging.getLogger(__name__)

# ANSI "reset to initial state" (RIS)
FULL_RESET = "\x1bc"


class ConsoleTerminal(TerminalSurface):
    """Writes session output to a console stream and flushes after each write."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        try:
            self._stream.write(text)
            self._stream.flush()
        except (OSError, ValueError) as e:
            raise TerminalError(f"Failed to write to console: {e}", surface="console") from e

    def reset(self) -> None:
        self.write(FULL_RESET)

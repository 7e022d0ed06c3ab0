"""In-memory terminal surface.

Keeps a bounded line buffer with a cursor so the HTTP endpoint (and the
tests) can read back what a user would see on screen.
"""

from __future__ import annotations

import logging

from termsession.terminal.base import TerminalSurface

logger = logging.getLogger(__name__)


class ScreenBuffer(TerminalSurface):
    """Terminal surface backed by a list of text lines.

    Written text is interpreted the way a plain terminal would: ``\\r``
    returns to column 0, ``\\n`` starts a new line, ``\\b`` moves the
    cursor left and printable characters overwrite at the cursor. Other
    control characters are dropped.
    """

    def __init__(
        self,
        rows: int = 24,
        cols: int = 80,
        scrollback_lines: int = 1000,
    ) -> None:
        super().__init__()
        self._rows = rows
        self._cols = cols
        self._scrollback_lines = scrollback_lines
        self._lines: list[str] = [""]
        self._col = 0
        self._reset_count = 0

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def reset_count(self) -> int:
        """Number of times ``reset`` has been called."""
        return self._reset_count

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def write(self, text: str) -> None:
        for char in text:
            self._put(char)
        # Trim scrollback
        if len(self._lines) > self._scrollback_lines:
            self._lines = self._lines[-self._scrollback_lines:]

    def reset(self) -> None:
        self._lines = [""]
        self._col = 0
        self._reset_count += 1
        logger.debug("Screen buffer reset")

    def get_screen_content(self) -> str:
        """Get the current terminal screen content."""
        visible = self._lines[-self._rows:]
        # Pad with empty lines if fewer than rows
        while len(visible) < self._rows:
            visible.insert(0, "")
        # Truncate lines to cols
        visible = [line[:self._cols] for line in visible]
        return "\n".join(visible)

    def _put(self, char: str) -> None:
        if char == "\r":
            self._col = 0
        elif char == "\n":
            self._lines.append("")
            self._col = 0
        elif char == "\b":
            self._col = max(0, self._col - 1)
        elif char == "\t" or (char >= " " and char != "\x7f"):
            line = self._lines[-1]
            if self._col < len(line):
                line = line[:self._col] + char + line[self._col + 1:]
            else:
                line = line + " " * (self._col - len(line)) + char
            self._lines[-1] = line
            self._col += 1

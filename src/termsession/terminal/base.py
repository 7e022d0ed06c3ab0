"""Abstract base class for character-stream terminal surfaces.

The session state machine only talks to this interface, so the same
session can run behind the in-memory screen used by the HTTP endpoint,
a local console, or a test double.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)

DataHandler = Callable[[str], None]

LINE_BREAK = "\r\n"


class TerminalSurface(ABC):
    """Abstract interface for a character-stream display.

    Output flows through ``write``/``write_line``/``reset``. Input flows
    the other way: the host calls ``receive`` with each chunk it gets
    from the user, and every handler registered through ``on_data`` is
    invoked with that chunk.

    Example usage::

        terminal = ScreenBuffer(rows=24, cols=80)
        terminal.on_data(machine.handle_data)
        terminal.receive("help\\r")
        print(terminal.get_screen_content())
    """

    def __init__(self) -> None:
        self._handlers: list[DataHandler] = []

    @abstractmethod
    def write(self, text: str) -> None:
        """Append text verbatim, including control sequences like ``\\b \\b``.

        Raises:
            TerminalError: If the surface cannot accept output.
        """
        ...

    @abstractmethod
    def reset(self) -> None:
        """Clear all visible content and scrollback."""
        ...

    def write_line(self, text: str) -> None:
        """Write text followed by the surface's line break."""
        self.write(text + LINE_BREAK)

    def on_data(self, handler: DataHandler) -> None:
        """Register a handler for incoming input chunks."""
        self._handlers.append(handler)

    def receive(self, chunk: str) -> None:
        """Deliver an input chunk from the host to every registered handler."""
        if not self._handlers:
            logger.debug("Dropping %d input chars, no handler registered", len(chunk))
            return
        for handler in self._handlers:
            handler(chunk)


class TerminalError(Exception):
    """Raised when a terminal surface operation fails."""

    def __init__(self, message: str, surface: str = "") -> None:
        super().__init__(message)
        self.surface = surface

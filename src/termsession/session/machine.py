"""Session state machine for a terminal connection.

Turns a stream of raw character events into completed lines, applies
backspace edits, masks password input, and routes each completed line
either to the login handshake or to the command resolver.
"""

from __future__ import annotations

import logging

from pydantic import SecretStr

from termsession.commands.resolver import Resolver
from termsession.domain.models import Session, SessionState
from termsession.terminal.base import TerminalSurface

logger = logging.getLogger(__name__)

BACKSPACE_CHARS = frozenset({"\x7f", "\x08"})
LINE_TERMINATORS = frozenset({"\r", "\n"})
ERASE_SEQUENCE = "\b \b"

COMMAND_PROMPT = "> "
LOGIN_PROMPT = "login: "
PASSWORD_PROMPT = "\npassword: "


class SessionStateMachine:
    """Drives one terminal session from login to command execution.

    States move ``AWAITING_USERNAME`` -> ``AWAITING_PASSWORD`` ->
    ``AUTHENTICATED``, or start in ``AUTHENTICATED`` when ``skip_login``
    is set. Every event runs to completion before the next one.

    Example usage::

        terminal = ScreenBuffer()
        machine = SessionStateMachine(terminal, Resolver(default_registry(), terminal))
        machine.start()
        terminal.receive("alice\\rsecret\\rhelp\\r")
    """

    def __init__(
        self,
        terminal: TerminalSurface,
        resolver: Resolver,
        skip_login: bool = False,
    ) -> None:
        self._terminal = terminal
        self._resolver = resolver
        self._skip_login = skip_login
        self._session = self._new_session()
        self._started = False

    @property
    def session(self) -> Session:
        """A snapshot of the current session state."""
        return self._session.model_copy()

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    def start(self) -> None:
        """Write the initial prompt and subscribe to terminal input."""
        if self._started:
            return
        self._started = True
        self._terminal.on_data(self.handle_data)
        self._terminal.write(self._initial_prompt())
        logger.debug("Session started in state %s", self._session.state.value)

    def reset_session(self) -> None:
        """Drop credentials and the pending line, then prompt again."""
        self._session = self._new_session()
        self._terminal.write(self._initial_prompt())
        logger.info("Session reset")

    def handle_data(self, chunk: str) -> None:
        """Handle one input event, replaying multi-character chunks per character.

        A CRLF pair inside one chunk completes a single line.
        """
        previous = ""
        for char in chunk:
            if not (char == "\n" and previous == "\r"):
                self.handle_char(char)
            previous = char

    def handle_char(self, char: str) -> None:
        session = self._session
        if char in BACKSPACE_CHARS:
            session.input_buffer = session.input_buffer[:-1]
            self._terminal.write(ERASE_SEQUENCE)
            return

        session.input_buffer += char
        if session.state != SessionState.AWAITING_PASSWORD:
            self._terminal.write(char)

        if char not in LINE_TERMINATORS:
            return

        self._process_line(session.input_buffer[:-1])
        self._session.input_buffer = ""

    def _process_line(self, line: str) -> None:
        state = self._session.state
        if state == SessionState.AWAITING_USERNAME:
            self._accept_username(line)
        elif state == SessionState.AWAITING_PASSWORD:
            self._accept_password(line)
        else:
            self._run_command(line.strip())

    def _accept_username(self, line: str) -> None:
        # An empty username leaves the next line collecting the username again.
        self._session.username = line
        if line != "":
            self._session.state = SessionState.AWAITING_PASSWORD
        self._terminal.write(PASSWORD_PROMPT)

    def _accept_password(self, line: str) -> None:
        session = self._session
        session.password = SecretStr(line)
        self._terminal.write("\r\n" + COMMAND_PROMPT)
        if session.is_authenticated:
            session.state = SessionState.AUTHENTICATED
            logger.info("User %r logged in", session.username)
        else:
            logger.info("Empty password for %r, still awaiting password", session.username)

    def _run_command(self, line: str) -> None:
        result = self._resolver.resolve(line)
        if result != "":
            self._terminal.write_line(f"\r\n{result}")
        self._terminal.write(COMMAND_PROMPT)

    def _new_session(self) -> Session:
        return Session(
            skip_login=self._skip_login,
            state=(
                SessionState.AUTHENTICATED
                if self._skip_login
                else SessionState.AWAITING_USERNAME
            ),
        )

    def _initial_prompt(self) -> str:
        return COMMAND_PROMPT if self._skip_login else LOGIN_PROMPT

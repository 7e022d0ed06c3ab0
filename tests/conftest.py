"""Shared test fixtures for the termsession test suite.

Provides a recording terminal surface, registries, resolvers and
session state machines in the states the tests start from.
"""

from __future__ import annotations

import pytest

from termsession.commands.registry import CommandRegistry, default_registry
from termsession.commands.resolver import Resolver
from termsession.domain.models import CommandDefinition, Parameter
from termsession.session.machine import SessionStateMachine
from termsession.terminal.base import TerminalSurface


class RecordingTerminal(TerminalSurface):
    """Terminal surface that records every write and reset."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[str] = []
        self.reset_calls = 0

    def write(self, text: str) -> None:
        self.writes.append(text)

    def reset(self) -> None:
        self.reset_calls += 1

    @property
    def output(self) -> str:
        return "".join(self.writes)

    def clear_record(self) -> None:
        self.writes.clear()


# ---------------------------------------------------------------------------
# Terminal Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def terminal() -> RecordingTerminal:
    """A fresh recording terminal."""
    return RecordingTerminal()


# ---------------------------------------------------------------------------
# Registry / Resolver Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> CommandRegistry:
    """The baseline help/account/clear registry."""
    return default_registry()


@pytest.fixture
def echo_definition() -> CommandDefinition:
    """A command with one required and one optional parameter."""
    return CommandDefinition(
        cmd="echo",
        name="Echo",
        description="Echoes its arguments.",
        params=(
            Parameter(name="text", description="Text to echo."),
            Parameter(name="suffix", description="Appended text.", optional=True),
        ),
    )


@pytest.fixture
def resolver(registry: CommandRegistry, terminal: RecordingTerminal) -> Resolver:
    return Resolver(registry, terminal)


# ---------------------------------------------------------------------------
# Session Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def machine(terminal: RecordingTerminal, resolver: Resolver) -> SessionStateMachine:
    """A started session waiting for a username."""
    m = SessionStateMachine(terminal, resolver)
    m.start()
    return m


@pytest.fixture
def open_machine(terminal: RecordingTerminal, resolver: Resolver) -> SessionStateMachine:
    """A started session with login skipped."""
    m = SessionStateMachine(terminal, resolver, skip_login=True)
    m.start()
    return m

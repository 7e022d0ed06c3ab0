"""FastAPI HTTP server hosting a terminal session.

Receives keystrokes and text via HTTP, feeds them to the session state
machine, and exposes the resulting screen content.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from pydantic import BaseModel, Field

from termsession.commands.model import CommandBehavior
from termsession.commands.registry import CommandRegistry, default_registry
from termsession.commands.resolver import Resolver
from termsession.session.machine import SessionStateMachine
from termsession.terminal.buffer import ScreenBuffer

logger = logging.getLogger(__name__)


class KeystrokeRequest(BaseModel):
    key: str = Field(description="Key name (e.g., 'Enter', 'Backspace', 'a')")


class TextInputRequest(BaseModel):
    text: str = Field(description="Text to type")


class EndpointStatus(BaseModel):
    status: str = "ok"
    state: str
    authenticated: bool


# Key name to character mapping
KEY_MAP = {
    "Enter": "\r",
    "Return": "\r",
    "Tab": "\t",
    "Space": " ",
    "Backspace": "\x7f",
}


def create_app(
    registry: CommandRegistry | None = None,
    skip_login: bool = False,
    rows: int = 24,
    cols: int = 80,
    scrollback_lines: int = 1000,
    terminal: ScreenBuffer | None = None,
    behaviors: dict[str, CommandBehavior] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    if terminal is None:
        terminal = ScreenBuffer(rows=rows, cols=cols, scrollback_lines=scrollback_lines)
    if registry is None:
        registry = default_registry()

    resolver = Resolver(registry, terminal, behaviors)
    machine = SessionStateMachine(terminal, resolver, skip_login=skip_login)
    machine.start()

    app = FastAPI(
        title="termsession Endpoint",
        description="HTTP surface for a termsession command session",
        version="0.1.0",
    )

    app.state.terminal = terminal
    app.state.machine = machine

    @app.get("/health")
    async def health_check() -> EndpointStatus:
        m: SessionStateMachine = app.state.machine
        return EndpointStatus(
            status="ok",
            state=m.state.value,
            authenticated=m.is_authenticated,
        )

    @app.post("/keystroke")
    async def receive_keystroke(request: KeystrokeRequest) -> dict[str, str]:
        t: ScreenBuffer = app.state.terminal
        key = request.key
        char = KEY_MAP.get(key, key if len(key) == 1 else None)
        if char is None:
            return {"status": "ignored", "reason": f"Unknown key: {key}"}
        t.receive(char)
        return {"status": "ok", "key": key}

    @app.post("/text")
    async def receive_text(request: TextInputRequest) -> dict[str, str]:
        t: ScreenBuffer = app.state.terminal
        t.receive(request.text)
        return {"status": "ok", "length": str(len(request.text))}

    @app.post("/line")
    async def receive_line(request: TextInputRequest) -> dict[str, str]:
        t: ScreenBuffer = app.state.terminal
        t.receive(request.text + "\r")
        return {"status": "ok", "length": str(len(request.text))}

    @app.get("/screen")
    async def get_screen_content() -> dict[str, str]:
        t: ScreenBuffer = app.state.terminal
        return {"content": t.get_screen_content()}

    @app.post("/session/reset")
    async def reset_session() -> EndpointStatus:
        t: ScreenBuffer = app.state.terminal
        m: SessionStateMachine = app.state.machine
        t.reset()
        m.reset_session()
        return EndpointStatus(
            status="ok",
            state=m.state.value,
            authenticated=m.is_authenticated,
        )

    logger.info("Endpoint ready (%d commands, skip_login=%s)", len(registry), skip_login)
    return app


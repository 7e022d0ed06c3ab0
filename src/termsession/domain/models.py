"""Core domain models for the termsession system.

These models represent the data flowing through the interpreter:
command definitions held by the registry, bound command instances
created per invocation, and the per-connection session state owned by
the session state machine.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class SessionState(str, enum.Enum):
    """Login progress of a terminal session."""

    AWAITING_USERNAME = "awaiting_username"
    AWAITING_PASSWORD = "awaiting_password"
    AUTHENTICATED = "authenticated"


# ---------------------------------------------------------------------------
# Command Models
# ---------------------------------------------------------------------------


class Parameter(BaseModel):
    """A positional parameter declared by a command.

    ``value`` stays empty until the parameter is bound from an input
    line. Unbound parameters keep the empty string.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Parameter name shown in help output")
    description: str = Field(default="", description="What the parameter is for")
    optional: bool = Field(
        default=False,
        description="Descriptive only; missing values are never rejected",
    )
    value: str = Field(default="", description="Value bound from the input line")


class CommandDefinition(BaseModel):
    """A registry entry describing one command.

    Identity is the ``cmd`` token, which is unique within a registry.
    """

    model_config = ConfigDict(frozen=True)

    cmd: str = Field(min_length=1, description="Token that triggers the command")
    name: str = Field(description="Long name of the command")
    description: str = Field(default="", description="One-line description")
    params: tuple[Parameter, ...] = Field(
        default=(), description="Parameter templates in positional order"
    )


class CommandInstance(BaseModel):
    """A command definition copied and bound to one invocation.

    Created by ``bind`` for each resolved line and discarded after
    execution. Its parameters are private copies of the definition's
    templates.
    """

    cmd: str
    name: str
    description: str = ""
    params: list[Parameter] = Field(default_factory=list)

    def param_value(self, name: str) -> str:
        """Return the bound value of the named parameter, or ``""``."""
        for param in self.params:
            if param.name == name:
                return param.value
        return ""


# ---------------------------------------------------------------------------
# Session Models
# ---------------------------------------------------------------------------


class Session(BaseModel):
    """Mutable per-connection state owned by the session state machine."""

    input_buffer: str = Field(default="", description="Characters of the line being typed")
    username: str = Field(default="")
    password: SecretStr = Field(default=SecretStr(""))
    skip_login: bool = Field(default=False, description="Start already authenticated")
    state: SessionState = Field(default=SessionState.AWAITING_USERNAME)

    @property
    def is_authenticated(self) -> bool:
        return self.skip_login or (
            self.username != "" and self.password.get_secret_value() != ""
        )

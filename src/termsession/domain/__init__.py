"""Domain models shared across the termsession packages."""

from termsession.domain.models import (
    CommandDefinition,
    CommandInstance,
    Parameter,
    Session,
    SessionState,
)

__all__ = [
    "CommandDefinition",
    "CommandInstance",
    "Parameter",
    "Session",
    "SessionState",
]

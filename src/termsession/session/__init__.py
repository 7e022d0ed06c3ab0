"""Session state machine driving login and command input."""

from termsession.session.machine import SessionStateMachine

__all__ = ["SessionStateMachine"]

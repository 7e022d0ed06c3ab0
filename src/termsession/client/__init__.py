"""Client for driving a running termsession endpoint."""

from termsession.client.http_client import HttpTerminalClient, TerminalClientError

__all__ = ["HttpTerminalClient", "TerminalClientError"]

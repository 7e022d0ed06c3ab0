"""HTTP client for the termsession endpoint.

Types keystrokes and text into a running endpoint and reads back its
screen content.
"""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)


class HttpTerminalClient:
    """Sends input to a termsession endpoint over HTTP.

    Example usage::

        async with HttpTerminalClient(base_url="http://localhost:8080") as client:
            await client.send_line("help")
            print(await client.get_screen())
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Create the HTTP client and verify endpoint connectivity."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        try:
            resp = await self._client.get("/health")
            resp.raise_for_status()
            logger.info("Connected to endpoint at %s", self._base_url)
        except httpx.HTTPError as e:
            await self._client.aclose()
            self._client = None
            raise TerminalClientError(
                f"Failed to connect to endpoint: {e}", url=self._base_url
            ) from e

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Disconnected from endpoint")

    async def send_keystroke(self, key: str) -> None:
        await self._request("POST", "/keystroke", {"key": key})
        logger.debug("Sent keystroke: %s", key)

    async def send_text(self, text: str) -> None:
        await self._request("POST", "/text", {"text": text})
        logger.debug("Sent %d chars of text", len(text))

    async def send_line(self, text: str) -> None:
        """Type a string of text and press Enter."""
        await self.send_text(text)
        await self.send_keystroke("Enter")

    async def get_screen(self) -> str:
        resp = await self._request("GET", "/screen")
        return resp.json().get("content", "")

    async def _request(
        self, method: str, path: str, payload: dict | None = None
    ) -> httpx.Response:
        if self._client is None:
            raise TerminalClientError("Not connected to endpoint", url=self._base_url)
        try:
            resp = await self._client.request(method, path, json=payload)
            resp.raise_for_status()
            return resp
        except httpx.HTTPError as e:
            raise TerminalClientError(
                f"HTTP request to {path} failed: {e}", url=self._base_url
            ) from e

    async def __aenter__(self) -> HttpTerminalClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.disconnect()


class TerminalClientError(Exception):
    """Raised when talking to the endpoint fails."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url

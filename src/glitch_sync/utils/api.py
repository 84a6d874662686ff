"""
HTTP client for the Glitch API.

Thin aiohttp wrapper used by the sync runner. Each call sends exactly one
request; there are no retries.
"""

import asyncio
from http import HTTPStatus
from typing import Any

import aiohttp

from glitch_sync.core.types import ImportRequest, ImportResponse
from glitch_sync.exceptions import ImportRequestError
from glitch_sync.utils.logging import get_logger

logger = get_logger("glitch_sync.utils.api")

GLITCH_API_URL = "https://api.glitch.com"


class GlitchClient:
    """
    Helper class for talking to the Glitch API.

    Example:
        ```python
        async with GlitchClient() as client:
            response = await client.send(request)
        ```
    """

    def __init__(self, timeout: float | None = None, headers: dict[str, str] | None = None):
        """
        Initialize the client.

        Args:
            timeout: Total request timeout in seconds. None leaves aiohttp's
                     default in place.
            headers: Default headers to include in all requests
        """
        self.default_headers = headers or {}
        self.timeout_seconds = timeout
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout is not None else None

        self.session: aiohttp.ClientSession | None = None
        self._session_lock = asyncio.Lock()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session exists, creating it if needed."""
        async with self._session_lock:
            if self.session is None or self.session.closed:
                kwargs: dict[str, Any] = {"headers": self.default_headers}
                if self.timeout is not None:
                    kwargs["timeout"] = self.timeout
                self.session = aiohttp.ClientSession(**kwargs)
            return self.session

    async def __aenter__(self) -> "GlitchClient":
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the session if one is open."""
        async with self._session_lock:
            if self.session and not self.session.closed:
                await self.session.close()
            self.session = None

    async def send(self, request: ImportRequest) -> ImportResponse:
        """
        Send a single request and read the whole response body.

        Bytes that do not decode in the response charset are replaced.

        Args:
            request: Request to send. Its headers are not logged.

        Returns:
            ImportResponse with status, reason phrase and body text

        Raises:
            ImportRequestError: If a configured timeout expires
            aiohttp.ClientError: On transport failures
        """
        session = await self._ensure_session()

        try:
            async with session.request(request.method, request.url, headers=request.headers) as response:
                text = await response.text(errors="replace")
        except asyncio.TimeoutError as e:
            message = "Request to Glitch timed out"
            if self.timeout_seconds is not None:
                message += f" after {self.timeout_seconds}s"
            raise ImportRequestError(
                message,
                details={"timeout": self.timeout_seconds},
            ) from e
        logger.debug(f"{request.method} {request.url} {response.status}")

        return ImportResponse(status=response.status, reason=_reason_phrase(response.status, response.reason), text=text)


def _reason_phrase(status: int, reason: str | None) -> str:
    """Reason phrase sent by the server, or the standard phrase for ``status``."""
    if reason:
        return reason
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""

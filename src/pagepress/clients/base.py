"""HTTP client base class.

Shared lifecycle for the Pinboard, blog and Dropbox clients:
- Connection lifecycle (connect, disconnect, async with)
- httpx.AsyncClient initialization with configurable headers/timeout
- Optional injected AsyncClient (tests pass one built on httpx.MockTransport)

Usage:
    class MyAPIClient(HTTPClient):
        DEFAULT_HEADERS = {"Accept": "application/json"}

        async def fetch(self) -> dict:
            client = self._ensure_client()
            response = await client.get("https://api.example.com")
            response.raise_for_status()
            return response.json()

    async with MyAPIClient() as api:
        data = await api.fetch()
"""

from types import TracebackType
from typing import Self

import httpx


class ClientError(Exception):
    """Base exception for client errors."""

    pass


class PayloadError(ClientError):
    """Raised when a response body cannot be decoded into the expected shape."""

    pass


class HTTPClient:
    """Base class for HTTP API clients.

    Optional overrides:
    - DEFAULT_TIMEOUT: Request timeout in seconds (default: 30.0)
    - DEFAULT_HEADERS: Headers to include in all requests
    - _get_headers(): For dynamic header generation
    """

    DEFAULT_TIMEOUT: float = 30.0
    DEFAULT_HEADERS: dict[str, str] = {}
    USER_AGENT = "pagepress/0.3 (+https://ylukem.com)"

    def __init__(
        self,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            timeout: Request timeout in seconds (defaults to DEFAULT_TIMEOUT)
            client: Pre-built AsyncClient; the caller keeps ownership of it
        """
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self._client = client
        self._owns_client = client is None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for HTTP requests.

        Override in subclasses for custom headers.

        Returns:
            Headers dict to use for requests
        """
        return {"User-Agent": self.USER_AGENT, **self.DEFAULT_HEADERS}

    async def connect(self) -> None:
        """Create the underlying AsyncClient unless one was injected."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self._get_headers(),
                follow_redirects=True,
            )
            self._owns_client = True

    async def disconnect(self) -> None:
        """Close the AsyncClient if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.disconnect()

    def _ensure_client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized.

        Raises:
            ClientError: If client is not initialized
        """
        if self._client is None:
            raise ClientError(f"{type(self).__name__} must be connected before use")
        return self._client

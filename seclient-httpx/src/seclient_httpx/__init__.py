"""httpx transport for the SolarEdge client."""

from typing import Any

import httpx
import structlog

from seclient.api.transport import TransportResponse
from seclient.config.settings import Settings

logger = structlog.get_logger(__name__)

__all__ = ["HttpxTransport"]


class HttpxTransport:
    """Performs SolarEdge client requests with an ``httpx.AsyncClient``.

    A transport created without a client opens its own and closes it in
    ``aclose``. A caller-supplied client is left open.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 10.0) -> None:
        """Initialize the transport.

        Args:
            client: Client to send requests with. One is created if omitted.
            timeout: Request timeout in seconds for a created client.
        """
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpxTransport":
        """Create a transport using the configured request timeout."""
        return cls(timeout=settings.api_timeout)

    async def execute(
        self,
        method: str,
        url: str,
        body: bytes | None = None,
    ) -> TransportResponse:
        """Send a request.

        Args:
            method: HTTP method.
            url: Absolute URL including the query string.
            body: Optional request body.

        Returns:
            Status code and body bytes. Non-2xx responses are returned, not raised.
        """
        response = await self._client.request(method, url, content=body)
        return TransportResponse(status_code=response.status_code, content=response.content)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
            logger.debug("Closed HTTP client")

    async def __aenter__(self) -> "HttpxTransport":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Context manager exit."""
        await self.aclose()

"""Transport protocol the client sends its requests through."""

from typing import NamedTuple, Protocol, runtime_checkable


class TransportResponse(NamedTuple):
    """Raw outcome of one HTTP exchange."""

    status_code: int
    content: bytes


@runtime_checkable
class HttpTransport(Protocol):
    """Anything that can perform an HTTP request.

    Implementations own connection handling, timeouts and cancellation. They
    may raise any exception on failure; the client wraps it into a
    ``TransportError``.
    """

    async def execute(
        self,
        method: str,
        url: str,
        body: bytes | None = None,
    ) -> TransportResponse:
        """Perform the request and return status code and body bytes."""
        ...

"""Custom exception hierarchy for the SolarEdge client."""


class SolarEdgeError(Exception):
    """Base exception for all SolarEdge client errors."""

    pass


class ConfigurationError(SolarEdgeError):
    """Error in client configuration."""

    pass


class TransportError(SolarEdgeError):
    """The injected transport failed to complete the request.

    The transport's own exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, endpoint: str) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class ApiError(SolarEdgeError):
    """The API answered with a non-2xx status."""

    def __init__(self, message: str, endpoint: str, status_code: int, body: bytes = b"") -> None:
        """Initialize API error.

        Args:
            message: Error message.
            endpoint: Client method that issued the request.
            status_code: HTTP status code of the response.
            body: Raw response body, verbatim.
        """
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body

    @property
    def text(self) -> str:
        """Response body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")


class DecodeError(SolarEdgeError):
    """A 2xx response body did not match the expected result shape."""

    def __init__(self, message: str, endpoint: str) -> None:
        super().__init__(message)
        self.endpoint = endpoint

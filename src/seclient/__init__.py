"""Typed async client for the SolarEdge Monitoring API."""

from seclient.api.client import SolarEdgeClient
from seclient.api.transport import HttpTransport, TransportResponse
from seclient.config.settings import Settings
from seclient.utils.exceptions import (
    ApiError,
    ConfigurationError,
    DecodeError,
    SolarEdgeError,
    TransportError,
)

__all__ = [
    "ApiError",
    "ConfigurationError",
    "DecodeError",
    "HttpTransport",
    "Settings",
    "SolarEdgeClient",
    "SolarEdgeError",
    "TransportError",
    "TransportResponse",
]

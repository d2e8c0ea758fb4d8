"""Utility modules for the SolarEdge client."""

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
    "SolarEdgeError",
    "TransportError",
]

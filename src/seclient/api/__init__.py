"""SolarEdge Monitoring API client, request parameters and transport protocol."""

from seclient.api.client import SolarEdgeClient
from seclient.api.transport import HttpTransport, TransportResponse

__all__ = ["HttpTransport", "SolarEdgeClient", "TransportResponse"]

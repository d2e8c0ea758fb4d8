"""Configuration for the SolarEdge client."""

from seclient.config.logging import configure_logging, get_logger
from seclient.config.settings import DEFAULT_BASE_URL, Settings, get_settings

__all__ = [
    "DEFAULT_BASE_URL",
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
]

"""Client for the Studio Ghibli REST API."""

from .client import RESOURCES, GhibliClient
from .errors import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamHTTPError,
    UpstreamNotFoundError,
    UpstreamPayloadError,
)

__all__ = [
    "RESOURCES",
    "GhibliClient",
    "UpstreamConnectionError",
    "UpstreamError",
    "UpstreamHTTPError",
    "UpstreamNotFoundError",
    "UpstreamPayloadError",
]

"""HTTP client for the ONTRAPORT API."""

from .ontraport_client import OntraportClient
from .response import Response
from .transport import Transport, APIError

__all__ = [
    "OntraportClient",
    "Response",
    "Transport",
    "APIError",
]

"""
Python client for the ONTRAPORT API.

See https://api.ontraport.com/doc for the API documentation.
"""

from .core import (
    ObjectType,
    Configuration,
    ObjectMetadata,
    InvalidArgumentError,
    ObjectNotFoundError,
    ConfigError,
    load_configuration,
)
from .client import OntraportClient, Response, APIError

__version__ = "0.1.0"

__all__ = [
    "OntraportClient",
    "Response",
    "APIError",
    "ObjectType",
    "Configuration",
    "ObjectMetadata",
    "InvalidArgumentError",
    "ObjectNotFoundError",
    "ConfigError",
    "load_configuration",
]

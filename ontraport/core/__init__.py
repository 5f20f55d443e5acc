"""Core components for the ONTRAPORT client."""

from .models import (
    ObjectType,
    Configuration,
    ObjectMetadata,
    InvalidArgumentError,
    ObjectNotFoundError,
    ConfigError,
)
from .schema import SchemaCache
from .config_store import (
    get_base_dir,
    credentials_path,
    save_configuration,
    load_configuration,
)

__all__ = [
    "ObjectType",
    "Configuration",
    "ObjectMetadata",
    "InvalidArgumentError",
    "ObjectNotFoundError",
    "ConfigError",
    "SchemaCache",
    "get_base_dir",
    "credentials_path",
    "save_configuration",
    "load_configuration",
]

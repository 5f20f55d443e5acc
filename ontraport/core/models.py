"""Core data models for the ONTRAPORT client."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

BASE_URL = "https://api.ontraport.com/"
API_VERSION = "1"

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def parse_bool(value: Any) -> bool:
    """Interpret a flag from the environment or a hand-edited file."""
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES
    return bool(value)


class ObjectType(str, Enum):
    """Built-in ONTRAPORT object types, matched against metadata names."""
    CONTACT = "contact"
    COMPANY = "company"
    DEAL = "deal"
    CAMPAIGN = "campaign"
    FORM = "form"
    MESSAGE = "message"
    NOTE = "note"
    OFFER = "offer"
    PRODUCT = "product"
    PURCHASE = "purchase"
    SEQUENCE = "sequence"
    TAG = "tag"
    TASK = "task"
    TRANSACTION = "transaction"


@dataclass(frozen=True)
class Configuration:
    """
    Credentials and connection settings for the ONTRAPORT API.

    Credentials are not validated locally; missing or wrong values
    surface as an authentication error from the API.
    """
    api_id: str
    api_key: str
    debug_mode: bool = False
    base_url: str = BASE_URL
    api_version: str = API_VERSION
    timeout_seconds: float = 10.0

    @property
    def api_url(self) -> str:
        """Base URL joined with the version prefix, e.g. https://api.ontraport.com/1"""
        return f"{self.base_url.rstrip('/')}/{self.api_version.strip('/')}"

    def to_dict(self) -> dict[str, Any]:
        """Convert Configuration to a dictionary."""
        return {
            "api_id": self.api_id,
            "api_key": self.api_key,
            "debug_mode": self.debug_mode,
            "base_url": self.base_url,
            "api_version": self.api_version,
            "timeout_seconds": self.timeout_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Configuration":
        """Create Configuration from a dictionary."""
        return cls(
            api_id=data["api_id"],
            api_key=data["api_key"],
            debug_mode=parse_bool(data.get("debug_mode", False)),
            base_url=data.get("base_url", BASE_URL),
            api_version=str(data.get("api_version", API_VERSION)),
            timeout_seconds=float(data.get("timeout_seconds", 10.0)),
        )


@dataclass(frozen=True)
class ObjectMetadata:
    """
    Schema metadata for one object type.

    schema_object_id is the numeric id of the object type, as a string,
    taken from the key it is stored under in the /objects/meta response.
    """
    name: str
    schema_object_id: str
    fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert ObjectMetadata to a dictionary."""
        return {
            "name": self.name,
            "fields": self.fields,
            "schema_object_id": self.schema_object_id,
        }


class InvalidArgumentError(ValueError):
    """Raised when an object type argument is not a valid type name."""
    pass


class ObjectNotFoundError(Exception):
    """Raised when no object in the schema metadata matches the requested type."""
    pass


class ConfigError(Exception):
    """Raised when there is an error loading or saving configuration."""
    pass

"""Cache of object schema metadata fetched from /objects/meta."""

import logging
import threading
from collections.abc import Callable
from typing import Any

from .models import ObjectMetadata, ObjectNotFoundError, InvalidArgumentError, ObjectType

logger = logging.getLogger(__name__)

META_ENDPOINT = "/objects/meta"


def normalize_object_type(object_type: ObjectType | str) -> str:
    """
    Validate an object type argument and return its lowercase name.

    Args:
        object_type: ObjectType member or object name (e.g. "contact")

    Returns:
        Lowercased object name

    Raises:
        InvalidArgumentError: If object_type is not an ObjectType or a non-blank string
    """
    if isinstance(object_type, ObjectType):
        return object_type.value

    if not isinstance(object_type, str) or not object_type.strip():
        raise InvalidArgumentError(
            f"Must provide an ObjectType or object name, got {object_type!r}."
        )

    return object_type.strip().lower()


class SchemaCache:
    """
    Lazily fetched, manually invalidated cache of object metadata.

    The whole metadata collection is fetched with a single request the
    first time it is needed and reused until clear() is called.
    """

    def __init__(self, fetch: Callable[[], Any]):
        """
        Initialize the cache.

        Args:
            fetch: Callable returning the parsed /objects/meta response
        """
        self._fetch = fetch
        self._lock = threading.Lock()
        self._meta: dict[str, Any] | None = None

    def _objects_meta(self) -> dict[str, Any]:
        meta = self._meta
        if meta is not None:
            return meta

        with self._lock:
            if self._meta is None:
                logger.info("Fetching object metadata")
                response = self._fetch()
                data = response.get("data") or {}
                self._meta = dict(data)
                logger.info(f"Cached metadata for {len(self._meta)} object types")
            return self._meta

    def describe(self, object_type: ObjectType | str) -> ObjectMetadata:
        """
        Describe an object type, including its numeric id and fields.

        Args:
            object_type: ObjectType member or object name, matched case-insensitively

        Returns:
            ObjectMetadata for the object type

        Raises:
            InvalidArgumentError: If object_type is not a valid type name
            ObjectNotFoundError: If no object in the schema matches
        """
        name = normalize_object_type(object_type)

        for object_id, entry in self._objects_meta().items():
            if str(entry.get("name", "")).lower() == name:
                return ObjectMetadata(
                    name=entry["name"],
                    fields=entry.get("fields") or {},
                    schema_object_id=str(object_id),
                )

        raise ObjectNotFoundError(f"No object matching {name!r} could be found.")

    def object_types(self) -> list[str]:
        """Names of all object types in the schema metadata."""
        return [entry.get("name", "") for entry in self._objects_meta().values()]

    def clear(self) -> None:
        """Discard cached metadata. The next describe() fetches it again."""
        with self._lock:
            self._meta = None
        logger.info("Object metadata cache cleared")

"""Read-only wrapper around parsed API responses."""

import re
from collections.abc import Iterator, Mapping
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATORS = re.compile(r"[\s\-]+")


def snake_case(key: Any) -> str:
    """
    Normalize a response key to snake_case.

    Examples:
        >>> snake_case("objectID")
        'object_id'
        >>> snake_case("account_id")
        'account_id'
    """
    key = _SEPARATORS.sub("_", str(key))
    return _CAMEL_BOUNDARY.sub("_", key).lower()


class Response(Mapping):
    """
    Immutable view of a parsed API response.

    Top-level keys are normalized with snake_case() and are available both
    as items and attributes (response["data"] or response.data). Nested
    values are returned as parsed. When two keys normalize to the same
    name, the later key in the parsed body wins.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None):
        object.__setattr__(
            self, "_data", {snake_case(k): v for k, v in (data or {}).items()}
        )

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"Response has no field {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Response is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Response is read-only")

    def __repr__(self) -> str:
        return f"Response({self._data!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the response data."""
        return dict(self._data)

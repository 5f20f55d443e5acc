"""Normalization of list-valued request parameters."""

from collections.abc import Sequence
from typing import Any

# Parameters the API expects as comma-delimited strings of ids
LIST_PARAMS = ("ids", "add_list", "remove_list")


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return [value]
    return list(value)


def join_list(value: Any) -> str:
    """
    Join a scalar or sequence of ids into a comma-delimited string.

    Examples:
        >>> join_list(12345)
        '12345'
        >>> join_list([150, 200])
        '150,200'
        >>> join_list("150,200")
        '150,200'
    """
    return ",".join(str(item) for item in _as_list(value))


def split_list(value: Any) -> list[str]:
    """
    Split a comma-delimited string, scalar or sequence into a list of strings.

    Examples:
        >>> split_list("1,2")
        ['1', '2']
        >>> split_list([1, 2])
        ['1', '2']
    """
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item) for item in _as_list(value)]


def normalize_list_params(params: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of params with every list-valued parameter joined."""
    normalized = dict(params)
    for key in LIST_PARAMS:
        if key in normalized and normalized[key] is not None:
            normalized[key] = join_list(normalized[key])
    return normalized

"""Classification of arrays into the layouts the encoder can write."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from toonkit.options import ToonError
from toonkit.primitives import is_primitive


def is_tabular_array(arr: Sequence[Any]) -> list[str] | None:
    """Return the field names when every element is an object with the same keys
    and only primitive values; otherwise None.

    The field order is taken from the first object; later objects may list
    their keys in any order.
    """
    if not arr:
        return None

    first = arr[0]
    if not isinstance(first, dict):
        return None
    if not all(is_primitive(v) for v in first.values()):
        return None

    keys = list(first)
    for item in arr[1:]:
        if not isinstance(item, dict):
            return None
        if len(item) != len(keys):
            return None
        if any(key not in item for key in keys):
            return None
        if not all(is_primitive(v) for v in item.values()):
            return None

    return keys


def is_primitive_array(arr: Sequence[Any]) -> bool:
    """True when every element of the array is primitive."""
    return all(is_primitive(v) for v in arr)


def value_type_name(value: Any) -> str:
    """Name of the JSON type of a value, as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise ToonError(f"Unsupported value type: {type(value).__name__}")
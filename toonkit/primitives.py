"""Helpers for telling primitive values apart from containers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def is_primitive(value: Any) -> bool:
    """True for None, booleans, numbers and strings."""
    return value is None or isinstance(value, (bool, int, float, str))


def all_primitives(values: Iterable[Any]) -> bool:
    """True when every value is primitive."""
    return all(is_primitive(v) for v in values)


def normalize_value(value: Any) -> Any:
    """Return a deep copy of JSON data with containers rebuilt."""
    if isinstance(value, list):
        return [normalize_value(v) for v in value]
    if isinstance(value, dict):
        return {k: normalize_value(v) for k, v in value.items()}
    return value
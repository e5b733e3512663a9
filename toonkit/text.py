"""String quoting, literal detection, number formatting and value normalisation."""

from __future__ import annotations

import dataclasses
import math
import re
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from toonkit.options import Delimiter, ToonError

MAX_DEPTH = 256
"""Deepest nesting the encoder accepts."""

_KEYWORDS = frozenset({"true", "false", "null"})
_NUMERIC = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")
_UNQUOTED_KEY = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_STRUCTURAL = frozenset(':"\\[]{}\n\r\t')
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


class QuotingContext(Enum):
    """Where a string value is written, which decides the delimiter in force."""

    OBJECT_VALUE = "object"
    ARRAY_VALUE = "array"


def escape_string(s: str) -> str:
    """Escape backslashes, quotes and line/tab control characters."""
    return "".join(_ESCAPES.get(ch, ch) for ch in s)


def quote_string(s: str) -> str:
    """Return the string escaped and wrapped in double quotes."""
    return f'"{escape_string(s)}"'


def is_keyword(s: str) -> bool:
    """True for the reserved words true, false and null."""
    return s in _KEYWORDS


def is_literal_like(s: str) -> bool:
    """True when the text would read back as a keyword or a number."""
    return is_keyword(s) or _NUMERIC.fullmatch(s) is not None


def needs_quoting(s: str, delimiter: Delimiter | str) -> bool:
    """True when the string cannot be written bare in the given delimiter context."""
    delim = delimiter.value if isinstance(delimiter, Delimiter) else delimiter
    if not s or s != s.strip():
        return True
    if is_literal_like(s):
        return True
    if any(ch in _STRUCTURAL for ch in s):
        return True
    if delim in s:
        return True
    return s.startswith("-")


def is_valid_unquoted_key(key: str) -> bool:
    """True when the key can be written without quotes."""
    return _UNQUOTED_KEY.fullmatch(key) is not None


def is_identifier_segment(key: str) -> bool:
    """True when the key is a plain identifier that may take part in a dotted path."""
    return _IDENTIFIER.fullmatch(key) is not None


def format_number(value: int | float) -> str:
    """Write a number in canonical form: no exponent and no trailing zeros."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ToonError(f"Expected a number, got {type(value).__name__}")
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def normalize(value: Any) -> Any:
    """Turn a value into plain JSON data: non-finite floats become None, -0 becomes 0."""
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value == 0:
            return 0
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return normalize({f.name: getattr(value, f.name) for f in dataclasses.fields(value)})
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ToonError(f"Object keys must be strings, got {type(key).__name__}")
            result[key] = normalize(item)
        return result
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    raise ToonError(f"Unsupported value type: {type(value).__name__}")


def validate_depth(depth: int, max_depth: int) -> None:
    """Raise ToonError when the nesting depth exceeds the limit."""
    if depth > max_depth:
        raise ToonError(f"Maximum nesting depth of {max_depth} exceeded (depth {depth})")
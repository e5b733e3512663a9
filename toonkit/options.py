"""Encoding and decoding options, plus the error types of the package."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from enum import Enum

UNLIMITED_DEPTH = sys.maxsize
"""Flatten depth meaning that key folding has no depth limit."""


class Delimiter(str, Enum):
    """Character separating values in inline and tabular arrays."""

    COMMA = ","
    TAB = "\t"
    PIPE = "|"


@dataclass(frozen=True)
class Indent:
    """Indentation made of a fixed number of spaces per level."""

    spaces: int = 2

    def __post_init__(self) -> None:
        if self.spaces < 0:
            raise ValueError("indent spaces must not be negative")

    def get_string(self, depth: int) -> str:
        """Return the whitespace prefix for the given nesting depth."""
        return " " * (self.spaces * depth)


class KeyFoldingMode(Enum):
    """Whether chains of single-key objects are folded into dotted keys."""

    OFF = "off"
    SAFE = "safe"


class PathExpansionMode(Enum):
    """Whether dotted keys are expanded back into nested objects."""

    OFF = "off"
    SAFE = "safe"


@dataclass(frozen=True)
class EncodeOptions:
    """Settings that control how values are written."""

    delimiter: Delimiter = Delimiter.COMMA
    indent: Indent = field(default_factory=Indent)
    key_folding: KeyFoldingMode = KeyFoldingMode.OFF
    flatten_depth: int = UNLIMITED_DEPTH

    def with_delimiter(self, delimiter: Delimiter) -> EncodeOptions:
        return replace(self, delimiter=delimiter)

    def with_indent(self, indent: Indent) -> EncodeOptions:
        return replace(self, indent=indent)

    def with_key_folding(self, mode: KeyFoldingMode) -> EncodeOptions:
        return replace(self, key_folding=mode)

    def with_flatten_depth(self, depth: int) -> EncodeOptions:
        return replace(self, flatten_depth=depth)


@dataclass(frozen=True)
class DecodeOptions:
    """Settings that control how text is read."""

    strict: bool = True
    coerce_types: bool = True
    expand_paths: PathExpansionMode = PathExpansionMode.OFF

    def with_strict(self, strict: bool) -> DecodeOptions:
        return replace(self, strict=strict)

    def with_coerce_types(self, coerce: bool) -> DecodeOptions:
        return replace(self, coerce_types=coerce)

    def with_expand_paths(self, mode: PathExpansionMode) -> DecodeOptions:
        return replace(self, expand_paths=mode)


class ToonError(Exception):
    """Base class for all errors raised by the package."""


class TypeMismatchError(ToonError):
    """A value had a different type from the one required."""

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(f"Type mismatch: expected {expected}, found {found}")
        self.expected = expected
        self.found = found
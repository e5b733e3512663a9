"""Encoding of JSON-like values into TOON text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from toonkit.folding import analyze_foldable_chain
from toonkit.options import (
    Delimiter,
    EncodeOptions,
    KeyFoldingMode,
    ToonError,
    TypeMismatchError,
)
from toonkit.tabular import is_primitive_array, is_tabular_array, value_type_name
from toonkit.text import MAX_DEPTH, QuotingContext, format_number, normalize, validate_depth
from toonkit.writer import Writer


def encode(value: Any, options: EncodeOptions | None = None) -> str:
    """Encode any JSON-like value (dicts, lists, dataclasses, primitives) to TOON."""
    opts = options if options is not None else EncodeOptions()
    return _Encoder(opts).run(normalize(value))


def encode_object(value: Any, options: EncodeOptions | None = None) -> str:
    """Encode a value that must be an object; raise TypeMismatchError otherwise."""
    normalized = normalize(value)
    if not isinstance(normalized, dict):
        raise TypeMismatchError("object", value_type_name(normalized))
    return _Encoder(options if options is not None else EncodeOptions()).run(normalized)


def encode_array(value: Any, options: EncodeOptions | None = None) -> str:
    """Encode a value that must be an array; raise TypeMismatchError otherwise."""
    normalized = normalize(value)
    if not isinstance(normalized, list):
        raise TypeMismatchError("array", value_type_name(normalized))
    return _Encoder(options if options is not None else EncodeOptions()).run(normalized)


class _Encoder:
    """Walks a normalised value and writes it through a Writer."""

    def __init__(self, options: EncodeOptions) -> None:
        self.writer = Writer(options)

    @property
    def options(self) -> EncodeOptions:
        return self.writer.options

    def run(self, value: Any) -> str:
        if isinstance(value, list):
            self._write_array(None, value, 0)
        elif isinstance(value, dict):
            self._write_object(value, 0)
        else:
            self._write_primitive(value, QuotingContext.OBJECT_VALUE)
        return self.writer.finish()

    def _write_primitive(self, value: Any, context: QuotingContext) -> None:
        w = self.writer
        if value is None:
            w.write_str("null")
        elif isinstance(value, bool):
            w.write_str("true" if value else "false")
        elif isinstance(value, (int, float)):
            w.write_str(format_number(value))
        elif isinstance(value, str):
            w.write_value(value, context)
        else:
            raise ToonError("Expected primitive value")

    def _write_key_value(self, key: str, value: Any, nested_depth: int) -> None:
        """Write 'key: value' or 'key:' plus a nested object, without indentation."""
        w = self.writer
        w.write_key(key)
        w.write_str(":")
        if isinstance(value, dict):
            if value:
                w.write_newline()
                self._write_object(value, nested_depth)
        else:
            w.write_str(" ")
            self._write_primitive(value, QuotingContext.OBJECT_VALUE)

    def _write_object(self, obj: dict[str, Any], depth: int, disable_folding: bool = False) -> None:
        validate_depth(depth, MAX_DEPTH)
        w = self.writer
        keys = list(obj)

        for index, key in enumerate(keys):
            if index:
                w.write_newline()
            value = obj[key]

            # A sibling dotted path starting with this key blocks folding here.
            conflicting = any(k.startswith(f"{key}.") or ("." in k and k == key) for k in keys)

            chain = None
            if (
                not disable_folding
                and self.options.key_folding is KeyFoldingMode.SAFE
                and not conflicting
            ):
                chain = analyze_foldable_chain(key, value, self.options.flatten_depth, keys)

            if chain is not None:
                if depth > 0:
                    w.write_indent(depth)
                leaf = chain.leaf_value
                if isinstance(leaf, list):
                    self._write_array(chain.folded_key, leaf, 0)
                elif isinstance(leaf, dict):
                    w.write_key(chain.folded_key)
                    w.write_str(":")
                    if leaf:
                        w.write_newline()
                        self._write_object(leaf, depth + 1, True)
                else:
                    self._write_key_value(chain.folded_key, leaf, depth + 1)
            elif isinstance(value, list):
                self._write_array(key, value, depth)
            elif isinstance(value, dict):
                if depth > 0:
                    w.write_indent(depth)
                w.write_key(key)
                w.write_str(":")
                if value:
                    w.write_newline()
                    self._write_object(value, depth + 1, disable_folding or conflicting)
            else:
                if depth > 0:
                    w.write_indent(depth)
                self._write_key_value(key, value, depth + 1)

    def _write_array(self, key: str | None, arr: list[Any], depth: int) -> None:
        validate_depth(depth, MAX_DEPTH)
        if not arr:
            self.writer.write_empty_array_with_key(key, depth)
            return

        fields = is_tabular_array(arr)
        if fields is not None:
            self._write_tabular_array(key, arr, fields, depth)
        elif is_primitive_array(arr):
            self._write_primitive_array(key, arr, depth)
        else:
            self._write_nested_array(key, arr, depth)

    def _write_primitive_array(self, key: str | None, arr: list[Any], depth: int) -> None:
        w = self.writer
        w.write_array_header(key, len(arr), None, depth)
        w.write_str(" ")
        w.push_active_delimiter(self.options.delimiter)
        for index, item in enumerate(arr):
            if index:
                w.write_delimiter()
            self._write_primitive(item, QuotingContext.ARRAY_VALUE)
        w.pop_active_delimiter()

    def _write_rows(self, arr: list[Any], fields: Sequence[str], row_depth: int) -> None:
        w = self.writer
        w.push_active_delimiter(self.options.delimiter)
        for row_index, row in enumerate(arr):
            if row_index:
                w.write_newline()
            w.write_indent(row_depth)
            for index, name in enumerate(fields):
                if index:
                    w.write_delimiter()
                self._write_primitive(row.get(name), QuotingContext.ARRAY_VALUE)
        w.pop_active_delimiter()

    def _write_tabular_array(
        self, key: str | None, arr: list[Any], fields: Sequence[str], depth: int
    ) -> None:
        self.writer.write_array_header(key, len(arr), fields, depth)
        self.writer.write_newline()
        self._write_rows(arr, fields, depth + 1)

    def _write_list_item_tabular_array(
        self, arr: list[Any], fields: Sequence[str], depth: int
    ) -> None:
        """Tabular array as the first field of a list item: rows sit two levels deeper."""
        w = self.writer
        delimiter = self.options.delimiter
        w.write_str(f"[{len(arr)}")
        if delimiter is not Delimiter.COMMA:
            w.write_str(delimiter.value)
        w.write_str("]{")
        for index, name in enumerate(fields):
            if index:
                w.write_str(delimiter.value)
            w.write_key(name)
        w.write_str("}:")
        w.write_newline()
        self._write_rows(arr, fields, depth + 2)

    def _write_list_item_object(self, obj: dict[str, Any], depth: int) -> None:
        w = self.writer
        items = iter(obj.items())
        first = next(items, None)
        if first is None:
            return
        w.write_str(" ")
        first_key, first_value = first
        if isinstance(first_value, list):
            w.write_key(first_key)
            fields = is_tabular_array(first_value)
            if fields is not None:
                self._write_list_item_tabular_array(first_value, fields, depth + 1)
            else:
                self._write_array(None, first_value, depth + 2)
        else:
            self._write_key_value(first_key, first_value, depth + 3)

        for key, value in items:
            w.write_newline()
            w.write_indent(depth + 2)
            if isinstance(value, list):
                w.write_key(key)
                self._write_array(None, value, depth + 2)
            else:
                self._write_key_value(key, value, depth + 3)

    def _write_nested_array(self, key: str | None, arr: list[Any], depth: int) -> None:
        w = self.writer
        w.write_array_header(key, len(arr), None, depth)
        w.write_newline()
        w.push_active_delimiter(self.options.delimiter)

        for index, item in enumerate(arr):
            if index:
                w.write_newline()
            w.write_indent(depth + 1)
            w.write_str("-")
            if isinstance(item, list):
                w.write_str(" ")
                self._write_array(None, item, depth + 1)
            elif isinstance(item, dict):
                self._write_list_item_object(item, depth)
            else:
                w.write_str(" ")
                self._write_primitive(item, QuotingContext.ARRAY_VALUE)

        w.pop_active_delimiter()
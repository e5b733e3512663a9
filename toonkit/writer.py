"""Incremental builder of encoded output text."""

from __future__ import annotations

from collections.abc import Sequence

from toonkit.options import Delimiter, EncodeOptions
from toonkit.text import QuotingContext, is_valid_unquoted_key, needs_quoting, quote_string


class Writer:
    """Accumulates output pieces and tracks the delimiter in force."""

    def __init__(self, options: EncodeOptions | None = None) -> None:
        self.options = options if options is not None else EncodeOptions()
        self._parts: list[str] = []
        self._active_delimiters: list[Delimiter] = [self.options.delimiter]

    def finish(self) -> str:
        """Return everything written so far as one string."""
        return "".join(self._parts)

    def write_str(self, s: str) -> None:
        self._parts.append(s)

    def write_newline(self) -> None:
        self._parts.append("\n")

    def write_indent(self, depth: int) -> None:
        indent = self.options.indent.get_string(depth)
        if indent:
            self._parts.append(indent)

    def write_delimiter(self) -> None:
        self._parts.append(self.options.delimiter.value)

    def write_key(self, key: str) -> None:
        """Write a key, quoting it when it is not a valid bare key."""
        if is_valid_unquoted_key(key):
            self.write_str(key)
        else:
            self.write_quoted_string(key)

    def _write_length_bracket(self, length: int) -> None:
        self.write_str(f"[{length}")
        # A comma is implied, so only other delimiters appear in the header.
        if self.options.delimiter is not Delimiter.COMMA:
            self.write_delimiter()
        self.write_str("]")

    def write_array_header(
        self,
        key: str | None,
        length: int,
        fields: Sequence[str] | None,
        depth: int,
    ) -> None:
        """Write an array header: optional key, length and optional field list."""
        if key is not None:
            if depth > 0:
                self.write_indent(depth)
            self.write_key(key)

        self._write_length_bracket(length)

        if fields is not None:
            self.write_str("{")
            for index, name in enumerate(fields):
                if index:
                    self.write_delimiter()
                self.write_key(name)
            self.write_str("}")

        self.write_str(":")

    def write_empty_array_with_key(self, key: str | None, depth: int) -> None:
        """Write the header of an empty array."""
        if key is not None:
            if depth > 0:
                self.write_indent(depth)
            self.write_key(key)
        self._write_length_bracket(0)
        self.write_str(":")

    def needs_quoting(self, s: str, context: QuotingContext) -> bool:
        """Decide quoting using the document delimiter or the active one."""
        if context is QuotingContext.ARRAY_VALUE:
            delimiter = self._active_delimiters[-1]
        else:
            delimiter = self.options.delimiter
        return needs_quoting(s, delimiter)

    def write_quoted_string(self, s: str) -> None:
        self.write_str(quote_string(s))

    def write_value(self, s: str, context: QuotingContext) -> None:
        """Write a string value, quoted only if it has to be."""
        if self.needs_quoting(s, context):
            self.write_quoted_string(s)
        else:
            self.write_str(s)

    def push_active_delimiter(self, delimiter: Delimiter) -> None:
        self._active_delimiters.append(delimiter)

    def pop_active_delimiter(self) -> None:
        """Drop the innermost delimiter, always keeping the document default."""
        if len(self._active_delimiters) > 1:
            self._active_delimiters.pop()
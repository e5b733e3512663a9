"""Central state of the interactive interface: mode, panels, options and messages."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from toonkit.editor_state import EditorState
from toonkit.file_state import FileState
from toonkit.options import (
    UNLIMITED_DEPTH,
    DecodeOptions,
    Delimiter,
    EncodeOptions,
    Indent,
    KeyFoldingMode,
    PathExpansionMode,
)
from toonkit.repl_state import ReplState
from toonkit.theme import Theme

MIN_INDENT = 1
MAX_INDENT = 8
MIN_FLATTEN_DEPTH = 2
MAX_FLATTEN_DEPTH = 10

_NEXT_DELIMITER = {
    Delimiter.COMMA: Delimiter.TAB,
    Delimiter.TAB: Delimiter.PIPE,
    Delimiter.PIPE: Delimiter.COMMA,
}

_PANELS = ("show_settings", "show_help", "show_file_browser", "show_history", "show_diff")


class Mode(Enum):
    """Direction of conversion."""

    ENCODE = "encode"
    DECODE = "decode"

    def toggle(self) -> Mode:
        return Mode.DECODE if self is Mode.ENCODE else Mode.ENCODE

    def label(self) -> str:
        """Long description shown in the header."""
        if self is Mode.ENCODE:
            return "Encode (JSON → TOON)"
        return "Decode (TOON → JSON)"

    def short_name(self) -> str:
        return "Encode" if self is Mode.ENCODE else "Decode"


@dataclass(frozen=True)
class ConversionStats:
    """Token and byte counts of the last conversion, with the savings achieved."""

    json_tokens: int
    toon_tokens: int
    json_bytes: int
    toon_bytes: int
    token_savings: float
    byte_savings: float


@dataclass
class AppState:
    """Everything the interface shows and the options conversions use."""

    mode: Mode = Mode.ENCODE
    editor: EditorState = field(default_factory=EditorState)
    file_state: FileState = field(default_factory=FileState)
    repl: ReplState = field(default_factory=ReplState)
    theme: Theme = Theme.DARK
    encode_options: EncodeOptions = field(default_factory=EncodeOptions)
    decode_options: DecodeOptions = field(default_factory=DecodeOptions)
    show_settings: bool = False
    show_help: bool = False
    show_file_browser: bool = False
    show_history: bool = False
    show_diff: bool = False
    error_message: str | None = None
    status_message: str | None = None
    stats: ConversionStats | None = None
    should_quit: bool = False

    def toggle_mode(self) -> None:
        self.mode = self.mode.toggle()
        self.clear_error()
        self.clear_status()

    def toggle_theme(self) -> None:
        self.theme = self.theme.toggle()
        self.set_status("Theme toggled")

    def set_error(self, msg: str) -> None:
        """Show an error, replacing any status message."""
        self.error_message = msg
        self.status_message = None

    def set_status(self, msg: str) -> None:
        """Show a status message, replacing any error."""
        self.status_message = msg
        self.error_message = None

    def clear_error(self) -> None:
        self.error_message = None

    def clear_status(self) -> None:
        self.status_message = None

    def quit(self) -> None:
        self.should_quit = True

    def _toggle_panel(self, name: str) -> None:
        """Flip one overlay panel; opening it closes the others."""
        shown = not getattr(self, name)
        setattr(self, name, shown)
        if shown:
            for other in _PANELS:
                if other != name:
                    setattr(self, other, False)

    def toggle_settings(self) -> None:
        self._toggle_panel("show_settings")

    def toggle_help(self) -> None:
        self._toggle_panel("show_help")

    def toggle_file_browser(self) -> None:
        self._toggle_panel("show_file_browser")

    def toggle_history(self) -> None:
        self._toggle_panel("show_history")

    def toggle_diff(self) -> None:
        self._toggle_panel("show_diff")

    def cycle_delimiter(self) -> None:
        """Comma, then tab, then pipe, then back to comma."""
        nxt = _NEXT_DELIMITER[self.encode_options.delimiter]
        self.encode_options = self.encode_options.with_delimiter(nxt)

    def increase_indent(self) -> None:
        current = self.encode_options.indent.spaces
        if current < MAX_INDENT:
            self.encode_options = self.encode_options.with_indent(Indent(current + 1))

    def decrease_indent(self) -> None:
        current = self.encode_options.indent.spaces
        if current > MIN_INDENT:
            self.encode_options = self.encode_options.with_indent(Indent(current - 1))

    def toggle_fold_keys(self) -> None:
        mode = (
            KeyFoldingMode.SAFE
            if self.encode_options.key_folding is KeyFoldingMode.OFF
            else KeyFoldingMode.OFF
        )
        self.encode_options = self.encode_options.with_key_folding(mode)

    def increase_flatten_depth(self) -> None:
        """Unlimited becomes the minimum depth; otherwise grow up to the maximum."""
        depth = self.encode_options.flatten_depth
        if depth == UNLIMITED_DEPTH:
            self.encode_options = self.encode_options.with_flatten_depth(MIN_FLATTEN_DEPTH)
        elif depth < MAX_FLATTEN_DEPTH:
            self.encode_options = self.encode_options.with_flatten_depth(depth + 1)

    def decrease_flatten_depth(self) -> None:
        """Shrink the depth; below the minimum it becomes unlimited."""
        depth = self.encode_options.flatten_depth
        if depth == MIN_FLATTEN_DEPTH:
            self.encode_options = self.encode_options.with_flatten_depth(UNLIMITED_DEPTH)
        elif MIN_FLATTEN_DEPTH < depth != UNLIMITED_DEPTH:
            self.encode_options = self.encode_options.with_flatten_depth(depth - 1)

    def toggle_flatten_depth(self) -> None:
        """Switch between unlimited and the minimum depth."""
        depth = self.encode_options.flatten_depth
        new_depth = MIN_FLATTEN_DEPTH if depth == UNLIMITED_DEPTH else UNLIMITED_DEPTH
        self.encode_options = self.encode_options.with_flatten_depth(new_depth)

    def toggle_expand_paths(self) -> None:
        mode = (
            PathExpansionMode.SAFE
            if self.decode_options.expand_paths is PathExpansionMode.OFF
            else PathExpansionMode.OFF
        )
        self.decode_options = self.decode_options.with_expand_paths(mode)

    def toggle_strict(self) -> None:
        self.decode_options = self.decode_options.with_strict(not self.decode_options.strict)

    def toggle_coerce_types(self) -> None:
        self.decode_options = replace(
            self.decode_options, coerce_types=not self.decode_options.coerce_types
        )
"""Colour themes for the interactive interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Terminal colours used by the themes."""

    BLACK = "black"
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_BLUE = "light_blue"
    LIGHT_YELLOW = "light_yellow"


@dataclass(frozen=True)
class Style:
    """Foreground, background and boldness of a piece of text."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False


class Theme(Enum):
    """Available colour themes; DARK is the default."""

    DARK = "dark"
    LIGHT = "light"

    def toggle(self) -> Theme:
        """Switch between the dark and light themes."""
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK

    def background(self) -> Color:
        return Color.BLACK if self is Theme.DARK else Color.WHITE

    def foreground(self) -> Color:
        return Color.WHITE if self is Theme.DARK else Color.BLACK

    def border(self) -> Color:
        return Color.CYAN if self is Theme.DARK else Color.BLUE

    def border_active(self) -> Color:
        return Color.GREEN

    def title(self) -> Color:
        return Color.YELLOW if self is Theme.DARK else Color.BLUE

    def success(self) -> Color:
        return Color.GREEN

    def error(self) -> Color:
        return Color.RED

    def warning(self) -> Color:
        return Color.YELLOW

    def info(self) -> Color:
        return Color.CYAN

    def highlight(self) -> Color:
        return Color.BLUE if self is Theme.DARK else Color.LIGHT_BLUE

    def selection(self) -> Color:
        return Color.DARK_GRAY if self is Theme.DARK else Color.LIGHT_YELLOW

    def line_number(self) -> Color:
        return Color.DARK_GRAY if self is Theme.DARK else Color.GRAY

    def normal_style(self) -> Style:
        return Style(fg=self.foreground(), bg=self.background())

    def border_style(self, active: bool) -> Style:
        """Border style, highlighted when the panel is active."""
        return Style(fg=self.border_active() if active else self.border())

    def title_style(self) -> Style:
        return Style(fg=self.title(), bold=True)

    def highlight_style(self) -> Style:
        return Style(fg=self.foreground(), bg=self.highlight())

    def selection_style(self) -> Style:
        return Style(fg=self.foreground(), bg=self.selection(), bold=True)

    def error_style(self) -> Style:
        return Style(fg=self.error(), bold=True)

    def success_style(self) -> Style:
        return Style(fg=self.success(), bold=True)

    def warning_style(self) -> Style:
        return Style(fg=self.warning(), bold=True)

    def info_style(self) -> Style:
        return Style(fg=self.info())

    def line_number_style(self) -> Style:
        return Style(fg=self.line_number())
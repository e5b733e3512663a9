"""Text held in the input and output panels, and which panel is active."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

INPUT_PLACEHOLDER = "Enter JSON here or open a file (Ctrl+O)"
OUTPUT_PLACEHOLDER = "TOON output will appear here"


class EditorMode(Enum):
    """Which panel currently has focus."""

    INPUT = "input"
    OUTPUT = "output"


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping a trailing empty line and any carriage returns."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class EditorState:
    """Contents of the input and output panels."""

    input: str = ""
    output: str = ""
    active: EditorMode = EditorMode.INPUT
    input_placeholder: str = INPUT_PLACEHOLDER
    output_placeholder: str = OUTPUT_PLACEHOLDER

    @property
    def input_lines(self) -> list[str]:
        return _split_lines(self.input)

    @property
    def output_lines(self) -> list[str]:
        return _split_lines(self.output)

    def set_input(self, text: str) -> None:
        """Replace the input text, normalising its line endings."""
        self.input = "\n".join(_split_lines(text))

    def set_output(self, text: str) -> None:
        """Replace the output text, normalising its line endings."""
        self.output = "\n".join(_split_lines(text))

    def clear_input(self) -> None:
        self.input = ""
        self.input_placeholder = INPUT_PLACEHOLDER

    def clear_output(self) -> None:
        self.output = ""
        self.output_placeholder = OUTPUT_PLACEHOLDER

    def toggle_active(self) -> None:
        """Move focus to the other panel."""
        self.active = EditorMode.OUTPUT if self.active is EditorMode.INPUT else EditorMode.INPUT

    def is_input_active(self) -> bool:
        return self.active is EditorMode.INPUT

    def is_output_active(self) -> bool:
        return self.active is EditorMode.OUTPUT
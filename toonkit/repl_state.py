"""State of an interactive REPL session."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

WELCOME = "TOON REPL - Type 'help' for commands, 'exit' to close"
MAX_COMMAND_HISTORY = 100
BOTTOM_WINDOW = 30


class ReplLineKind(Enum):
    """What a line of REPL output represents."""

    PROMPT = "prompt"
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class ReplLine:
    """One line of REPL output."""

    kind: ReplLineKind
    content: str


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def _welcome_output() -> list[ReplLine]:
    return [ReplLine(ReplLineKind.INFO, WELCOME)]


@dataclass
class ReplState:
    """Input line, output transcript, variables and command history."""

    active: bool = False
    input: str = ""
    output: list[ReplLine] = field(default_factory=_welcome_output)
    variables: dict[str, str] = field(default_factory=dict)
    history: list[str] = field(default_factory=list)
    history_index: int | None = None
    last_result: str | None = None
    scroll_offset: int = 0

    def activate(self) -> None:
        self.active = True
        self.input = ""
        self.history_index = None

    def deactivate(self) -> None:
        self.active = False
        self.input = ""
        self.history_index = None

    def add_prompt(self, cmd: str) -> None:
        self.output.append(ReplLine(ReplLineKind.PROMPT, f"> {cmd}"))

    def add_success(self, msg: str) -> None:
        """Add each line of the message as a success line."""
        self.output.extend(ReplLine(ReplLineKind.SUCCESS, line) for line in _lines(msg))

    def add_error(self, msg: str) -> None:
        self.output.append(ReplLine(ReplLineKind.ERROR, f"✗ {msg}"))

    def add_info(self, msg: str) -> None:
        """Add an info line, marked with a tick unless blank, indented or a heading."""
        if msg and not msg.startswith(("  ", "📖")):
            msg = f"✓ {msg}"
        self.output.append(ReplLine(ReplLineKind.INFO, msg))

    def add_to_history(self, cmd: str) -> None:
        """Remember a command, skipping blanks and immediate repeats."""
        if not cmd.strip():
            return
        if self.history and self.history[-1] == cmd:
            return
        self.history.append(cmd)
        if len(self.history) > MAX_COMMAND_HISTORY:
            del self.history[0]

    def history_up(self) -> None:
        """Recall the previous command."""
        if not self.history:
            return
        if self.history_index is None:
            index = len(self.history) - 1
        else:
            index = max(self.history_index - 1, 0)
        self.input = self.history[index]
        self.history_index = index

    def history_down(self) -> None:
        """Recall the next command, or clear the input past the newest."""
        if self.history_index is None:
            return
        if self.history_index >= len(self.history) - 1:
            self.input = ""
            self.history_index = None
        else:
            self.history_index += 1
            self.input = self.history[self.history_index]

    def scroll_up(self) -> None:
        if self.scroll_offset > 0:
            self.scroll_offset -= 1

    def scroll_down(self, visible_lines: int) -> None:
        max_scroll = max(len(self.output) - visible_lines, 0)
        if self.scroll_offset < max_scroll:
            self.scroll_offset += 1

    def scroll_to_bottom(self) -> None:
        self.scroll_offset = max(len(self.output) - BOTTOM_WINDOW, 0)
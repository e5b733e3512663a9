"""Keyboard shortcuts and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Action(Enum):
    """Actions that keyboard shortcuts can trigger."""

    QUIT = auto()
    TOGGLE_MODE = auto()
    SWITCH_PANEL = auto()
    OPEN_FILE = auto()
    SAVE_FILE = auto()
    REFRESH = auto()
    TOGGLE_SETTINGS = auto()
    TOGGLE_HELP = auto()
    TOGGLE_FILE_BROWSER = auto()
    TOGGLE_HISTORY = auto()
    TOGGLE_DIFF = auto()
    TOGGLE_THEME = auto()
    COPY_OUTPUT = auto()
    COPY_SELECTION = auto()
    PASTE_INPUT = auto()
    CLEAR_INPUT = auto()
    NEW_FILE = auto()
    ROUND_TRIP = auto()
    OPEN_REPL = auto()
    NONE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a character or key name such as "Tab" or "F1", plus modifiers."""

    code: str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def _only_ctrl(self) -> bool:
        return self.ctrl and not self.alt and not self.shift

    @property
    def _no_modifiers(self) -> bool:
        return not (self.ctrl or self.alt or self.shift)


@dataclass(frozen=True)
class _Binding:
    keys: tuple[str, ...]
    ctrl: bool
    action: Action
    description: str

    @property
    def label(self) -> str:
        if self.ctrl:
            return "Ctrl+" + "/".join(k.upper() for k in self.keys)
        return "/".join(self.keys)


# Listed in the order the help screen shows them.
_BINDINGS = (
    _Binding(("c", "q"), True, Action.QUIT, "Quit"),
    _Binding(("e", "m"), True, Action.TOGGLE_MODE, "Toggle Mode"),
    _Binding(("Tab",), False, Action.SWITCH_PANEL, "Switch Panel"),
    _Binding(("r",), True, Action.OPEN_REPL, "Open REPL"),
    _Binding(("o",), True, Action.OPEN_FILE, "Open File"),
    _Binding(("s",), True, Action.SAVE_FILE, "Save File"),
    _Binding(("n",), True, Action.NEW_FILE, "New File"),
    _Binding(("p",), True, Action.TOGGLE_SETTINGS, "Settings"),
    _Binding(("F1",), False, Action.TOGGLE_HELP, "Help"),
    _Binding(("f",), True, Action.TOGGLE_FILE_BROWSER, "File Browser"),
    _Binding(("h",), True, Action.TOGGLE_HISTORY, "History"),
    _Binding(("d",), True, Action.TOGGLE_DIFF, "Diff View"),
    _Binding(("t",), True, Action.TOGGLE_THEME, "Toggle Theme"),
    _Binding(("y",), True, Action.COPY_OUTPUT, "Copy All Output"),
    _Binding(("k",), True, Action.COPY_SELECTION, "Copy Selection"),
    _Binding(("v",), True, Action.PASTE_INPUT, "Paste Input"),
    _Binding(("b",), True, Action.ROUND_TRIP, "Round Trip Test"),
    _Binding(("l",), True, Action.CLEAR_INPUT, "Clear Input"),
)

_LOOKUP: dict[tuple[bool, str], Action] = {
    (binding.ctrl, key): binding.action
    for binding in _BINDINGS
    for key in binding.keys
}


def handle_key(key: KeyEvent) -> Action:
    """Map a key press to its action; modifiers must match exactly."""
    if key._only_ctrl:
        return _LOOKUP.get((True, key.code), Action.NONE)
    if key._no_modifiers:
        return _LOOKUP.get((False, key.code), Action.NONE)
    return Action.NONE


def shortcuts() -> list[tuple[str, str]]:
    """Shortcut and description pairs for the help screen."""
    return [(binding.label, binding.description) for binding in _BINDINGS]
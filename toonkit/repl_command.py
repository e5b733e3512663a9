"""Parser for REPL command lines with inline data."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ReplCommand:
    """A command name, optional inline data and remaining arguments."""

    name: str
    inline_data: str | None = None
    args: list[str] = field(default_factory=list)

    def has_flag(self, flag: str) -> bool:
        return flag in self.args

    def get_option(self, option: str) -> str | None:
        """Return the argument that follows the option, if any."""
        try:
            index = self.args.index(option)
        except ValueError:
            return None
        return self.args[index + 1] if index + 1 < len(self.args) else None


def _matching_brace_end(s: str) -> int:
    """Index just past the brace closing the first one, or the string's length."""
    depth = 0
    for index, ch in enumerate(s):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return index + 1
    return len(s)


def _looks_like_data(rest: str) -> bool:
    return rest.startswith(("{", '"', "$")) or ":" in rest


def parse_command(text: str) -> ReplCommand:
    """Parse a command line such as 'encode {"a": 1}' or 'decode name: Alice'.

    Raises ValueError for an empty line.
    """
    text = text.strip()
    if not text:
        raise ValueError("Empty command")

    name, sep, rest = text.partition(" ")
    if not sep:
        return ReplCommand(name=name)

    rest = rest.strip()
    if not _looks_like_data(rest):
        return ReplCommand(name=name, args=rest.split())

    if rest.startswith("{"):
        end = _matching_brace_end(rest)
    elif rest.startswith("$"):
        end = rest.find(" ")
    else:
        end = rest.find(" --")
    if end < 0:
        end = len(rest)

    data = rest[:end].strip()
    remaining = rest[end:].strip()
    return ReplCommand(name=name, inline_data=data, args=remaining.split())
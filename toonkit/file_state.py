"""Current file, selected files and conversion history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

MAX_HISTORY = 50
"""Number of conversions kept in the history."""


def _working_directory() -> Path:
    try:
        return Path.cwd()
    except OSError:
        return Path(".")


@dataclass(frozen=True)
class FileEntry:
    """A file or directory found while browsing."""

    path: Path
    is_dir: bool
    size: int = 0
    modified: datetime | None = None

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_json(self) -> bool:
        return not self.is_dir and self.path.suffix == ".json"

    @property
    def is_toon(self) -> bool:
        return not self.is_dir and self.path.suffix == ".toon"


@dataclass(frozen=True)
class ConversionHistory:
    """Record of one conversion."""

    timestamp: datetime
    mode: str
    input_file: Path | None = None
    output_file: Path | None = None
    token_savings: float = 0.0
    byte_savings: float = 0.0


@dataclass
class FileState:
    """The open file, the browsing directory, selections and history."""

    current_file: Path | None = None
    current_dir: Path = field(default_factory=_working_directory)
    selected_files: list[Path] = field(default_factory=list)
    history: list[ConversionHistory] = field(default_factory=list)
    is_modified: bool = False

    def set_current_file(self, path: Path | str) -> None:
        """Open a file: remember it and browse its directory from now on."""
        path = Path(path)
        self.current_file = path
        parent = path.parent
        self.current_dir = _working_directory() if parent == path else parent
        self.is_modified = False

    def clear_current_file(self) -> None:
        self.current_file = None
        self.is_modified = False

    def mark_modified(self) -> None:
        self.is_modified = True

    def add_to_history(self, entry: ConversionHistory) -> None:
        """Append an entry, dropping the oldest beyond the history limit."""
        self.history.append(entry)
        if len(self.history) > MAX_HISTORY:
            del self.history[0]

    def toggle_file_selection(self, path: Path | str) -> None:
        path = Path(path)
        if path in self.selected_files:
            self.selected_files.remove(path)
        else:
            self.selected_files.append(path)

    def clear_selection(self) -> None:
        self.selected_files.clear()

    def is_selected(self, path: Path | str) -> bool:
        return Path(path) in self.selected_files
"""Directory listing and selection for opening JSON and TOON files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PARENT = ".."


@dataclass(frozen=True)
class BrowserEntry:
    """One line of the file browser."""

    name: str
    is_dir: bool
    is_json: bool = False
    is_toon: bool = False


def _entry_for(path: Path) -> BrowserEntry:
    is_dir = path.is_dir()
    return BrowserEntry(
        name=path.name,
        is_dir=is_dir,
        is_json=not is_dir and path.suffix == ".json",
        is_toon=not is_dir and path.suffix == ".toon",
    )


@dataclass
class FileBrowser:
    """Cursor position within a directory listing."""

    selected_index: int = 0
    scroll_offset: int = 0

    def move_up(self) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1
            if self.selected_index < self.scroll_offset:
                self.scroll_offset = self.selected_index

    def move_down(self, count: int) -> None:
        """Move down, staying within a listing of count entries."""
        if self.selected_index < max(count - 1, 0):
            self.selected_index += 1

    def directory_entries(self, directory: Path | str) -> list[BrowserEntry]:
        """The parent entry, then directories, then files, each sorted by name."""
        entries = [BrowserEntry(PARENT, is_dir=True)]
        try:
            children = [_entry_for(child) for child in Path(directory).iterdir()]
        except OSError:
            return entries
        children.sort(key=lambda e: (not e.is_dir, e.name))
        entries.extend(children)
        return entries

    def selected_entry(self, directory: Path | str) -> Path | None:
        """Path of the selected entry; the parent entry leads up a directory."""
        directory = Path(directory)
        entries = self.directory_entries(directory)
        if self.selected_index >= len(entries):
            return None
        entry = entries[self.selected_index]
        if entry.name == PARENT:
            parent = directory.parent
            return None if parent == directory else parent
        return directory / entry.name

    def entry_count(self, directory: Path | str) -> int:
        return len(self.directory_entries(directory))
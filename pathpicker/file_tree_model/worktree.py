"""In-memory worktree snapshot used by the directory browser.

A worktree is an already-synchronized view of a directory subtree. It never
touches disk after construction: callers build it from a nested mapping or
from a filesystem scan and then only query it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath

from .types import Entry

ROOT_PATH = PurePosixPath("")


def normalize_relative_path(path: PurePosixPath | str) -> PurePosixPath:
    """Coerce ``path`` to a root-relative posix path (``""`` means root)."""
    text = str(path).replace("\\", "/").strip("/")
    if text in ("", "."):
        return ROOT_PATH
    return PurePosixPath(text)


class Worktree:
    """Read-only snapshot of entries below one project root."""

    def __init__(self, root_name: str, entries: Iterable[Entry] = (), *, loaded: bool = True) -> None:
        self.root_name = root_name
        self.loaded = loaded
        self._entries: dict[PurePosixPath, Entry] = {}
        self._children: dict[PurePosixPath, list[Entry]] = {ROOT_PATH: []}
        for entry in entries:
            self._insert(entry)

    def _insert(self, entry: Entry) -> None:
        path = normalize_relative_path(entry.path)
        if path == ROOT_PATH or path in self._entries:
            return
        parent = normalize_relative_path(path.parent)
        if parent != ROOT_PATH and parent not in self._entries:
            self._insert(Entry(path=parent, is_dir=True))
        normalized = Entry(path=path, is_dir=entry.is_dir)
        self._entries[path] = normalized
        self._children.setdefault(parent, []).append(normalized)
        if normalized.is_dir:
            self._children.setdefault(path, [])

    @classmethod
    def from_mapping(cls, root_name: str, tree: Mapping[str, object]) -> "Worktree":
        """Build a worktree from nested dicts; mappings are dirs, anything else files."""
        entries: list[Entry] = []

        def walk(prefix: PurePosixPath, node: Mapping[str, object]) -> None:
            for name, value in node.items():
                path = prefix / name
                if isinstance(value, Mapping):
                    entries.append(Entry(path=path, is_dir=True))
                    walk(path, value)
                else:
                    entries.append(Entry(path=path, is_dir=False))

        walk(ROOT_PATH, tree)
        return cls(root_name, entries)

    @classmethod
    def unloaded(cls, root_name: str) -> "Worktree":
        """Return a placeholder worktree whose scan has not completed yet."""
        return cls(root_name, (), loaded=False)

    def entry_for_path(self, path: PurePosixPath | str) -> Entry | None:
        """Return the entry at ``path`` or ``None`` when it is unknown."""
        return self._entries.get(normalize_relative_path(path))

    def is_directory(self, path: PurePosixPath | str) -> bool:
        """Return whether ``path`` is the root or a known directory."""
        normalized = normalize_relative_path(path)
        if normalized == ROOT_PATH:
            return True
        entry = self._entries.get(normalized)
        return entry is not None and entry.is_dir

    def child_entries(self, path: PurePosixPath | str) -> list[Entry]:
        """Return direct children of ``path`` in insertion order.

        Unknown directories and unloaded worktrees yield an empty list.
        """
        if not self.loaded:
            return []
        return list(self._children.get(normalize_relative_path(path), ()))

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "ROOT_PATH",
    "Worktree",
    "normalize_relative_path",
]

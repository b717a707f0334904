"""Domain datatypes for worktree entries and directory listing rows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True)
class Entry:
    """One file or directory node, addressed by its root-relative path."""

    path: PurePosixPath
    is_dir: bool

    @property
    def file_name(self) -> str:
        """Return the final path segment (empty for the worktree root)."""
        return self.path.name


@dataclass(frozen=True)
class DirectoryChild:
    """One row returned by an asynchronous directory read."""

    name: str
    is_dir: bool


__all__ = [
    "Entry",
    "DirectoryChild",
]

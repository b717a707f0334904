"""Asynchronous directory listers used by the open-path completion session."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path, PurePosixPath
from typing import Protocol

from .fs import list_directory_children
from .types import DirectoryChild
from .worktree import Worktree, normalize_relative_path

LOGGER = logging.getLogger(__name__)


def strip_drive(path: str) -> str:
    """Drop a leading ``X:`` drive designator from ``path``."""
    if len(path) >= 2 and path[1] == ":" and path[0].isalpha():
        return path[2:]
    return path


class DirectoryLister(Protocol):
    """Anything that can asynchronously list a directory named by a raw prefix."""

    async def read_directory(self, path: str) -> list[DirectoryChild]:
        """Return children of ``path``; ``""`` means the lister's root.

        Raises ``OSError`` when the directory cannot be read.
        """
        ...


class LocalDirectoryLister:
    """Reads real directories off the event loop thread."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root if root is not None else Path.cwd()

    def resolve(self, path: str) -> Path:
        """Map a typed directory prefix to a concrete directory path."""
        if not path:
            return self.root
        expanded = Path(os.path.expanduser(path))
        if expanded.is_absolute():
            return expanded
        return self.root / expanded

    async def read_directory(self, path: str) -> list[DirectoryChild]:
        directory = self.resolve(path)
        children, scan_error = await asyncio.to_thread(list_directory_children, directory)
        if scan_error is not None:
            LOGGER.debug("listing %r failed: %s", path, scan_error)
            if isinstance(scan_error, OSError):
                raise scan_error
            raise OSError(str(scan_error)) from scan_error
        return children


class WorktreeDirectoryLister:
    """Serves directory reads from an in-memory worktree snapshot.

    Relative prefixes resolve against the worktree root. An absolute prefix
    must start with ``/<root_name>``; ``/`` alone lists a single entry, the
    root directory itself. Drive letters are ignored and backslashes are
    treated as separators.
    """

    def __init__(self, worktree: Worktree) -> None:
        self.worktree = worktree

    def _relative(self, path: str) -> PurePosixPath | None:
        if not path.startswith("/"):
            return normalize_relative_path(path)
        parts = [part for part in path.split("/") if part]
        if not parts or parts[0] != self.worktree.root_name:
            return None
        return normalize_relative_path("/".join(parts[1:]))

    async def read_directory(self, path: str) -> list[DirectoryChild]:
        await asyncio.sleep(0)
        normalized = strip_drive(path.replace("\\", "/"))
        if normalized.startswith("/") and not normalized.strip("/"):
            return [DirectoryChild(name=self.worktree.root_name, is_dir=True)]
        relative = self._relative(normalized)
        if relative is None or not self.worktree.is_directory(relative):
            LOGGER.debug("no worktree directory for %r", path)
            raise FileNotFoundError(path)
        children = [
            DirectoryChild(name=entry.file_name, is_dir=entry.is_dir)
            for entry in self.worktree.child_entries(relative)
        ]
        children.sort(key=lambda item: item.name)
        return children


__all__ = [
    "DirectoryLister",
    "LocalDirectoryLister",
    "WorktreeDirectoryLister",
    "strip_drive",
]

"""Filesystem scanning helpers that feed worktree snapshots and listers."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath

from .types import DirectoryChild, Entry
from .worktree import ROOT_PATH, Worktree

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_SCAN_ENTRIES = 50_000


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], Exception | None]:
    """List every child of ``directory`` sorted by name.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned (including paths the OS rejects outright,
    such as ones with an embedded NUL), in which case ``children`` is empty.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=child.name, is_dir=is_dir))
    except (OSError, ValueError) as exc:
        return [], exc

    children.sort(key=lambda item: item.name)
    return children, None


def scan_worktree(root: Path, max_entries: int = DEFAULT_MAX_SCAN_ENTRIES) -> Worktree:
    """Walk ``root`` breadth-first and snapshot it as a :class:`Worktree`.

    Hidden entries are kept; visibility is decided when listing. Symlinked
    directories are recorded but not descended into. Scanning stops after
    ``max_entries`` entries.
    """
    root = root.resolve()
    entries: list[Entry] = []
    pending: list[tuple[Path, PurePosixPath]] = [(root, ROOT_PATH)]
    while pending and len(entries) < max_entries:
        directory, relative = pending.pop(0)
        try:
            with os.scandir(directory) as scanned:
                children = sorted(scanned, key=lambda item: item.name)
        except OSError as exc:
            LOGGER.debug("skipping unreadable directory %s: %s", directory, exc)
            continue

        for child in children:
            try:
                is_dir = child.is_dir()
                is_link = child.is_symlink()
            except OSError:
                is_dir = False
                is_link = False
            child_relative = relative / child.name
            entries.append(Entry(path=child_relative, is_dir=is_dir))
            if is_dir and not is_link:
                pending.append((Path(child.path), child_relative))
            if len(entries) >= max_entries:
                LOGGER.debug("worktree scan of %s truncated at %d entries", root, max_entries)
                break

    return Worktree(root.name or str(root), entries)


__all__ = [
    "DEFAULT_MAX_SCAN_ENTRIES",
    "list_directory_children",
    "scan_worktree",
]

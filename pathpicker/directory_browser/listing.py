"""Directory listing for one browse level of a worktree."""

from __future__ import annotations

from pathlib import PurePosixPath

from ..file_tree_model import ROOT_PATH, Entry, Worktree, normalize_relative_path
from .entries import PARENT_DIRECTORY, BrowseEntry, EntryRow


def is_hidden(entry: Entry) -> bool:
    """Return whether the entry's final path segment starts with a dot."""
    return entry.file_name.startswith(".")


def list_browse_entries(
    worktree: Worktree,
    directory: PurePosixPath | str,
    show_hidden: bool,
) -> list[BrowseEntry]:
    """Return ordered rows for ``directory``.

    Directories come before files, each group ordered by path components.
    A parent row leads the list whenever ``directory`` is not the root.
    Unknown directories and unloaded worktrees produce no concrete rows.
    """
    directory = normalize_relative_path(directory)
    rows: list[BrowseEntry] = []
    if directory != ROOT_PATH:
        rows.append(PARENT_DIRECTORY)

    dirs: list[Entry] = []
    files: list[Entry] = []
    for entry in worktree.child_entries(directory):
        if not show_hidden and is_hidden(entry):
            continue
        if entry.is_dir:
            dirs.append(entry)
        else:
            files.append(entry)

    dirs.sort(key=lambda entry: entry.path.parts)
    files.sort(key=lambda entry: entry.path.parts)
    rows.extend(EntryRow(entry) for entry in dirs)
    rows.extend(EntryRow(entry) for entry in files)
    return rows


__all__ = [
    "is_hidden",
    "list_browse_entries",
]

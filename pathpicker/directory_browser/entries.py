"""Browse-row datatypes: the synthetic parent row and concrete entry rows."""

from __future__ import annotations

from dataclasses import dataclass

from ..file_tree_model import Entry

PARENT_DISPLAY_NAME = ".."


@dataclass(frozen=True)
class ParentDirectory:
    """Synthetic "go up one level" row, shown only below the worktree root."""


@dataclass(frozen=True)
class EntryRow:
    """Browse row backed by a real worktree entry."""

    entry: Entry


BrowseEntry = ParentDirectory | EntryRow

PARENT_DIRECTORY = ParentDirectory()


def display_name(row: BrowseEntry) -> str:
    """Return the name matched against the filter query."""
    if isinstance(row, ParentDirectory):
        return PARENT_DISPLAY_NAME
    return row.entry.file_name or "."


def is_directory_row(row: BrowseEntry) -> bool:
    """Return whether confirming ``row`` navigates instead of opening."""
    if isinstance(row, ParentDirectory):
        return True
    return row.entry.is_dir


def file_entry(row: BrowseEntry) -> Entry | None:
    """Return the backing entry when ``row`` is a concrete file, else ``None``."""
    if isinstance(row, EntryRow) and not row.entry.is_dir:
        return row.entry
    return None


__all__ = [
    "PARENT_DISPLAY_NAME",
    "PARENT_DIRECTORY",
    "ParentDirectory",
    "EntryRow",
    "BrowseEntry",
    "display_name",
    "is_directory_row",
    "file_entry",
]

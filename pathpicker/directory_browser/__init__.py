"""One-level directory browser over an in-memory worktree.

Lists a directory (directories first, optional parent row), filters rows by
case-insensitive substring, and steps into or out of directories.
"""

from __future__ import annotations

from .entries import (
    PARENT_DIRECTORY,
    PARENT_DISPLAY_NAME,
    BrowseEntry,
    EntryRow,
    ParentDirectory,
    display_name,
    file_entry,
    is_directory_row,
)
from .listing import is_hidden, list_browse_entries
from .session import DEFAULT_SPLIT, SPLIT_DIRECTIONS, BrowseSession, DismissContext

__all__ = [
    "PARENT_DIRECTORY",
    "PARENT_DISPLAY_NAME",
    "BrowseEntry",
    "EntryRow",
    "ParentDirectory",
    "display_name",
    "file_entry",
    "is_directory_row",
    "is_hidden",
    "list_browse_entries",
    "SPLIT_DIRECTIONS",
    "DEFAULT_SPLIT",
    "BrowseSession",
    "DismissContext",
]

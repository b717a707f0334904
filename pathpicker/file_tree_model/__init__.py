"""Domain model for worktree snapshots and directory listings.

This package contains non-UI tree primitives:
- entry datatypes addressed by root-relative paths
- the in-memory worktree snapshot queried by the directory browser
- filesystem scanning helpers
- asynchronous directory listers for path completion
"""

from __future__ import annotations

from .types import DirectoryChild, Entry
from .worktree import ROOT_PATH, Worktree, normalize_relative_path
from .fs import list_directory_children, scan_worktree
from .listers import DirectoryLister, LocalDirectoryLister, WorktreeDirectoryLister

__all__ = [
    "Entry",
    "DirectoryChild",
    "ROOT_PATH",
    "Worktree",
    "normalize_relative_path",
    "list_directory_children",
    "scan_worktree",
    "DirectoryLister",
    "LocalDirectoryLister",
    "WorktreeDirectoryLister",
]

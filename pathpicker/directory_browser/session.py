"""Directory browser session: one-level listing, filtering, and navigation.

The session owns the current directory, the full row list for it, the
query-filtered subset, and the selection cursor. Host UIs drive it through
plain method calls and receive side effects (preview, open, dismiss, query
reset) through the hooks passed to the constructor. Hooks are notifications:
a failing hook is logged and never aborts the state change that fired it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePosixPath

from ..config import PreviewSettings, save_show_hidden
from ..file_tree_model import ROOT_PATH, Worktree, normalize_relative_path
from .entries import BrowseEntry, EntryRow, ParentDirectory, display_name, file_entry
from .listing import list_browse_entries

LOGGER = logging.getLogger(__name__)

SPLIT_DIRECTIONS = ("left", "right", "up", "down")
# Passed to ``open_entry`` when the host should pick its own split direction.
DEFAULT_SPLIT = "default"


@dataclass(frozen=True)
class DismissContext:
    """What the host needs to tidy up after the browser closes.

    ``restore_original`` is set when the user left without confirming while
    live preview may have replaced the originally active item.
    """

    confirmed: bool
    original_active_item_id: object | None
    restore_original: bool


class BrowseSession:
    """State-bound directory browsing operations used by a picker UI."""

    def __init__(
        self,
        *,
        worktree: Worktree,
        current_path: PurePosixPath | str = ROOT_PATH,
        initial_selected_name: str | None = None,
        show_hidden: bool = False,
        persist_show_hidden: bool = False,
        preview_settings: PreviewSettings | None = None,
        original_active_item_id: object | None = None,
        preview_entry: Callable[[PurePosixPath, bool], None] | None = None,
        open_entry: Callable[[PurePosixPath, str | None, bool], None] | None = None,
        dismiss: Callable[[DismissContext], None] | None = None,
        query_reset: Callable[[str], None] | None = None,
    ) -> None:
        """Bind the session to a worktree and load ``current_path``."""

        self.worktree = worktree
        self.current_path = normalize_relative_path(current_path)
        self.show_hidden = show_hidden
        self.persist_show_hidden = persist_show_hidden
        self.preview_settings = preview_settings if preview_settings is not None else PreviewSettings()
        self.original_active_item_id = original_active_item_id
        self.preview_entry = preview_entry
        self.open_entry = open_entry
        self.dismiss = dismiss
        self.query_reset = query_reset

        self.all_entries: list[BrowseEntry] = []
        self.filtered_entries: list[BrowseEntry] = []
        self.selected_index = 0
        self.query = ""
        self.confirmed = False
        self.closed = False
        self._initial_selected_name = initial_selected_name
        self.load_entries()

    @classmethod
    def for_active_path(
        cls,
        worktree: Worktree,
        active_path: PurePosixPath | str | None,
        **kwargs,
    ) -> "BrowseSession":
        """Open in the active file's directory with that file preselected.

        Without an active path the session starts at the worktree root.
        """
        if active_path is None:
            return cls(worktree=worktree, **kwargs)
        active = normalize_relative_path(active_path)
        if active == ROOT_PATH:
            return cls(worktree=worktree, **kwargs)
        return cls(
            worktree=worktree,
            current_path=normalize_relative_path(active.parent),
            initial_selected_name=active.name,
            **kwargs,
        )

    def _notify(self, hook: Callable[..., None] | None, *args: object) -> None:
        if hook is None:
            return
        try:
            hook(*args)
        except Exception:
            LOGGER.warning("directory browser hook %r failed", hook, exc_info=True)

    # listing
    def load_entries(self) -> None:
        """Rebuild rows for ``current_path`` and reset the cursor.

        A pending initial-selection name is consumed here, at most once.
        """
        self.all_entries = list_browse_entries(self.worktree, self.current_path, self.show_hidden)
        self.filtered_entries = list(self.all_entries)

        target_name = self._initial_selected_name
        self._initial_selected_name = None
        self.selected_index = 0
        if target_name is None:
            return
        for idx, row in enumerate(self.filtered_entries):
            if isinstance(row, EntryRow) and row.entry.file_name == target_name:
                self.selected_index = idx
                return

    def update_matches(self, query: str) -> None:
        """Filter rows by case-insensitive substring and clamp the cursor."""
        self.query = query
        needle = query.lower()
        if not needle:
            self.filtered_entries = list(self.all_entries)
        else:
            self.filtered_entries = [
                row for row in self.all_entries if needle in display_name(row).lower()
            ]

        if self.selected_index >= len(self.filtered_entries):
            self.selected_index = max(0, len(self.filtered_entries) - 1)
        self.preview_selected()

    def selected_entry(self) -> BrowseEntry | None:
        """Return the row under the cursor, if any."""
        if 0 <= self.selected_index < len(self.filtered_entries):
            return self.filtered_entries[self.selected_index]
        return None

    def set_selected_index(self, index: int) -> None:
        """Move the cursor, clamped to the filtered rows, and preview it."""
        self.selected_index = max(0, min(index, len(self.filtered_entries) - 1))
        self.preview_selected()

    def preview_selected(self) -> None:
        """Notify the preview hook when the cursor rests on a file row."""
        if not self.preview_settings.live_preview:
            return
        row = self.selected_entry()
        entry = file_entry(row) if row is not None else None
        if entry is None:
            return
        self._notify(self.preview_entry, entry.path, entry.is_dir)

    def placeholder_text(self) -> str:
        """Return the query-box hint naming the current directory."""
        name = self.current_path.name if self.current_path != ROOT_PATH else self.worktree.root_name
        return f"Search in {name or '.'}/"

    # navigation
    def _enter(self, path: PurePosixPath) -> None:
        self.current_path = path
        self.query = ""
        self.load_entries()
        self._notify(self.query_reset, self.placeholder_text())

    def navigate_to_parent(self) -> bool:
        """Go up one level; returns ``False`` at the worktree root."""
        if self.current_path == ROOT_PATH:
            return False
        self._enter(normalize_relative_path(self.current_path.parent))
        return True

    def navigate_into(self, row: BrowseEntry) -> bool:
        """Enter a directory row; returns ``False`` for files and the parent row."""
        if not isinstance(row, EntryRow) or not row.entry.is_dir:
            return False
        self._enter(row.entry.path)
        return True

    def toggle_show_hidden(self) -> bool:
        """Flip hidden-file visibility, reload, and re-apply the active query."""
        self.show_hidden = not self.show_hidden
        if self.persist_show_hidden:
            save_show_hidden(self.show_hidden)
        self.load_entries()
        if self.query:
            self.update_matches(self.query)
        return self.show_hidden

    # confirm / dismiss
    def confirm(self, secondary: bool = False, index: int | None = None) -> None:
        """Act on the selected row (or ``index``).

        The parent row and directories navigate; files are opened, in the
        host's default split when ``secondary`` is set, and the session is
        dismissed as confirmed. An out-of-range ``index`` does nothing.
        """
        if index is not None:
            if not 0 <= index < len(self.filtered_entries):
                return
            self.selected_index = index
        row = self.selected_entry()
        if row is None:
            return

        if isinstance(row, ParentDirectory):
            self.navigate_to_parent()
            return
        if row.entry.is_dir:
            self.navigate_into(row)
            return

        self.confirmed = True
        split = DEFAULT_SPLIT if secondary else None
        self._notify(self.open_entry, row.entry.path, split, self.preview_settings.preview_tabs)
        self.dismissed()

    def open_in_split(self, direction: str) -> bool:
        """Open the selected file in a split toward ``direction`` and dismiss."""
        if direction not in SPLIT_DIRECTIONS:
            raise ValueError(f"unknown split direction: {direction!r}")
        row = self.selected_entry()
        entry = file_entry(row) if row is not None else None
        if entry is None:
            return False
        self.confirmed = True
        self._notify(self.open_entry, entry.path, direction, False)
        self.dismissed()
        return True

    def dismissed(self) -> None:
        """Close the session once, telling the host whether to restore state."""
        if self.closed:
            return
        self.closed = True
        context = DismissContext(
            confirmed=self.confirmed,
            original_active_item_id=self.original_active_item_id,
            restore_original=not self.confirmed and self.preview_settings.live_preview,
        )
        self._notify(self.dismiss, context)


__all__ = [
    "SPLIT_DIRECTIONS",
    "DEFAULT_SPLIT",
    "DismissContext",
    "BrowseSession",
]

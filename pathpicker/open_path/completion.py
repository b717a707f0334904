"""Open-path completion session with last-query-wins directory reads.

Each :meth:`CompletionSession.update_matches` call bumps a generation counter
before suspending on the directory read. When the read returns, its result
is applied only if no newer update started in the meantime; otherwise it is
dropped, so a slow listing for an old query never overwrites a newer one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..file_tree_model import DirectoryChild, DirectoryLister
from .parser import ParsedQuery, parse_path_query
from .path_style import PathStyle

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """One completion row.

    ``kind`` is ``"path"`` for listed entries, ``"current_dir"`` for the
    synthetic stay-here row, and ``"new_path"`` for a typed name that does
    not exist yet (creating mode only).
    """

    name: str
    is_dir: bool
    kind: str = "path"


def default_query(initial_path: str, style: PathStyle) -> str:
    """Return the query that lists the directory containing ``initial_path``."""
    return parse_path_query(initial_path, style).directory_prefix


def preselect_name(initial_path: str, style: PathStyle) -> str | None:
    """Return the file name of ``initial_path`` to preselect, if it has one."""
    return parse_path_query(initial_path, style).partial_name or None


class CompletionSession:
    """Candidate list, cursor, and completion for a typed filesystem path."""

    def __init__(
        self,
        lister: DirectoryLister,
        *,
        creating_path: bool = False,
        path_style: PathStyle | None = None,
    ) -> None:
        self.lister = lister
        self.creating_path = creating_path
        self.path_style = path_style if path_style is not None else PathStyle.local()
        self.query = ""
        self.candidates: list[Candidate] = []
        self.selected_index = 0
        self.generation = 0
        self._preselect_name: str | None = None

    def with_preselect(self, file_name: str | None) -> "CompletionSession":
        """Select ``file_name`` after the next applied update (once)."""
        self._preselect_name = file_name
        return self

    async def update_matches(self, query: str) -> list[Candidate] | None:
        """Re-list candidates for ``query``.

        Returns the applied candidates, or ``None`` when a newer update
        superseded this one while the directory was being read.
        """
        self.generation += 1
        generation = self.generation
        parsed = parse_path_query(query, self.path_style)

        listing: list[DirectoryChild] | None
        try:
            listing = await self.lister.read_directory(parsed.directory_prefix)
        except OSError:
            listing = None

        if generation != self.generation:
            LOGGER.debug("dropping stale listing for %r", query)
            return None

        self.query = query
        self.candidates = [] if listing is None else self.build_candidates(parsed, listing)
        self.selected_index = self._consume_preselect()
        return list(self.candidates)

    def build_candidates(self, parsed: ParsedQuery, listing: list[DirectoryChild]) -> list[Candidate]:
        """Filter ``listing`` by case-insensitive name prefix.

        Listing order is preserved. The stay-here row leads when the query
        names a directory; in creating mode an unmatched typed name follows it.
        """
        needle = parsed.partial_name.lower()
        candidates: list[Candidate] = []
        if parsed.ends_with_separator or (not parsed.partial_name and parsed.directory_prefix):
            candidates.append(
                Candidate(name=self.path_style.current_directory_label, is_dir=True, kind="current_dir")
            )
        if (
            self.creating_path
            and parsed.partial_name
            and not any(child.name == parsed.partial_name for child in listing)
        ):
            candidates.append(Candidate(name=parsed.partial_name, is_dir=False, kind="new_path"))
        candidates.extend(
            Candidate(name=child.name, is_dir=child.is_dir)
            for child in listing
            if child.name.lower().startswith(needle)
        )
        return candidates

    def _consume_preselect(self) -> int:
        target = self._preselect_name
        self._preselect_name = None
        if target is None:
            return 0
        for idx, candidate in enumerate(self.candidates):
            if candidate.kind == "path" and candidate.name == target:
                return idx
        return 0

    def set_selected_index(self, index: int) -> None:
        self.selected_index = max(0, min(index, len(self.candidates) - 1))

    def selected_candidate(self) -> Candidate | None:
        if 0 <= self.selected_index < len(self.candidates):
            return self.candidates[self.selected_index]
        return None

    def collect_match_candidates(self) -> list[str]:
        """Return candidate labels in display order."""
        return [candidate.name for candidate in self.candidates]

    def confirm_completion(self, query: str, selected_index: int | None = None) -> str | None:
        """Return ``query`` completed with the chosen candidate.

        The typed directory prefix is kept verbatim and the style's primary
        separator is appended for directories. The stay-here row yields
        ``None``; advancing past it is left to the caller.
        """
        if selected_index is not None:
            self.set_selected_index(selected_index)
        candidate = self.selected_candidate()
        if candidate is None or candidate.kind == "current_dir":
            return None

        parsed = parse_path_query(query, self.path_style)
        completed = parsed.directory_prefix + candidate.name
        if candidate.is_dir:
            completed += self.path_style.primary_separator
        return completed


__all__ = [
    "Candidate",
    "CompletionSession",
    "default_query",
    "preselect_name",
]

"""Split a partially typed path into directory prefix and partial name."""

from __future__ import annotations

from dataclasses import dataclass

from .path_style import PathStyle


@dataclass(frozen=True)
class ParsedQuery:
    """Typed path split at its last separator.

    ``directory_prefix`` keeps the separator and drive exactly as typed so
    completions can echo the untouched part of the query back verbatim.
    """

    directory_prefix: str
    partial_name: str
    ends_with_separator: bool
    drive_prefix: str | None = None


def parse_path_query(raw: str, style: PathStyle) -> ParsedQuery:
    """Parse ``raw`` under ``style``; every style separator splits."""
    drive = style.drive_prefix(raw)
    if raw and style.is_separator(raw[-1]):
        return ParsedQuery(
            directory_prefix=raw,
            partial_name="",
            ends_with_separator=True,
            drive_prefix=drive,
        )

    split_at = style.last_separator_index(raw)
    if split_at < 0:
        head = drive or ""
        return ParsedQuery(
            directory_prefix=head,
            partial_name=raw[len(head):],
            ends_with_separator=False,
            drive_prefix=drive,
        )
    return ParsedQuery(
        directory_prefix=raw[: split_at + 1],
        partial_name=raw[split_at + 1:],
        ends_with_separator=False,
        drive_prefix=drive,
    )


__all__ = [
    "ParsedQuery",
    "parse_path_query",
]

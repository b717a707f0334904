"""Command-line front door for pathpicker.

``browse`` prints one directory level of a project tree the way the browser
session sees it; ``complete`` prints completion candidates for a typed path,
or the completed string for one of them.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from .config import load_preview_settings, load_show_hidden
from .directory_browser import BrowseSession, EntryRow, display_name, is_directory_row
from .file_tree_model import LocalDirectoryLister, scan_worktree
from .open_path import CompletionSession, PathStyle

DEBUG_ENV_VAR = "PATHPICKER_DEBUG"


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _configure_logging(verbose: bool) -> None:
    if verbose or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s] %(name)s: %(message)s",
        )


def render_browse_rows(session: BrowseSession) -> str:
    """Render filtered rows, marking the selected one with ``>``."""
    out: list[str] = []
    for idx, row in enumerate(session.filtered_entries):
        marker = ">" if idx == session.selected_index else " "
        name = display_name(row)
        if isinstance(row, EntryRow) and is_directory_row(row):
            name += "/"
        out.append(f"{marker} {name}\n")
    return "".join(out)


def run_browse(args: argparse.Namespace, default_path: Path) -> str:
    root = Path(args.root) if args.root is not None else default_path
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")
    show_hidden = args.show_hidden or load_show_hidden()
    session = BrowseSession(
        worktree=scan_worktree(root),
        current_path=args.dir,
        initial_selected_name=args.select,
        show_hidden=show_hidden,
        preview_settings=load_preview_settings(),
    )
    if args.query:
        session.update_matches(args.query)
    return render_browse_rows(session)


async def run_complete(args: argparse.Namespace, default_path: Path) -> str:
    session = CompletionSession(
        LocalDirectoryLister(default_path),
        creating_path=args.creating,
        path_style=PathStyle.from_name(args.style) if args.style else PathStyle.local(),
    )
    await session.update_matches(args.query)
    if args.confirm is not None:
        completed = session.confirm_completion(args.query, args.confirm)
        return "" if completed is None else completed + "\n"
    return "".join(f"{name}\n" for name in session.collect_match_candidates())


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print a browse listing or path completions.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used as the browse root and as the base for relative queries.
    """
    parser = argparse.ArgumentParser(
        description="Browse a project directory or complete a typed filesystem path."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    commands = parser.add_subparsers(dest="command", required=True)

    browse = commands.add_parser("browse", help="List one directory level of a project tree.")
    browse.add_argument("root", nargs="?", default=None, help="Project root. Defaults to current directory.")
    browse.add_argument("--dir", default="", help="Directory to list, relative to the root.")
    browse.add_argument("--query", default="", help="Case-insensitive substring filter.")
    browse.add_argument("--select", default=None, help="File name to select initially.")
    browse.add_argument("--show-hidden", action="store_true", help="Include dot-files.")

    complete = commands.add_parser("complete", help="List completions for a partially typed path.")
    complete.add_argument("query", help="Partially typed path.")
    complete.add_argument("--style", choices=("posix", "windows"), default=None, help="Path convention.")
    complete.add_argument("--creating", action="store_true", help="Allow a not-yet-existing name.")
    complete.add_argument(
        "--confirm",
        type=_nonnegative_int,
        default=None,
        metavar="N",
        help="Print the completion for candidate N instead of the candidate list.",
    )
    args = parser.parse_args()
    _configure_logging(args.verbose)

    if default_path is None:
        default_path = Path.cwd()
    if args.command == "browse":
        sys.stdout.write(run_browse(args, default_path))
        return
    sys.stdout.write(asyncio.run(run_complete(args, default_path)))


if __name__ == "__main__":
    main()

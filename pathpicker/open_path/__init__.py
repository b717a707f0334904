"""Typed-path completion: path styles, query parsing, and candidates.

Unlike the directory browser, candidates match by case-insensitive name
prefix, not substring.
"""

from __future__ import annotations

from .path_style import POSIX, WINDOWS, PathStyle
from .parser import ParsedQuery, parse_path_query
from .completion import Candidate, CompletionSession, default_query, preselect_name

__all__ = [
    "PathStyle",
    "POSIX",
    "WINDOWS",
    "ParsedQuery",
    "parse_path_query",
    "Candidate",
    "CompletionSession",
    "default_query",
    "preselect_name",
]

"""Platform path conventions used to parse and format typed paths."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class PathStyle:
    """Separator set, primary separator, and drive-letter support of a platform."""

    name: str
    separators: tuple[str, ...]
    supports_drive: bool

    @property
    def primary_separator(self) -> str:
        return self.separators[0]

    @property
    def current_directory_label(self) -> str:
        """Label of the "stay in this directory" candidate, e.g. ``./``."""
        return "." + self.primary_separator

    def is_separator(self, char: str) -> bool:
        return char in self.separators

    def last_separator_index(self, text: str) -> int:
        """Index of the last separator character in ``text`` or ``-1``."""
        return max(text.rfind(separator) for separator in self.separators)

    def drive_prefix(self, text: str) -> str | None:
        """Return a leading ``X:`` designator exactly as typed, if any."""
        if not self.supports_drive:
            return None
        if len(text) >= 2 and text[1] == ":" and text[0].isascii() and text[0].isalpha():
            return text[:2]
        return None

    @classmethod
    def local(cls) -> "PathStyle":
        """Return the style of the running platform."""
        return WINDOWS if os.name == "nt" else POSIX

    @classmethod
    def from_name(cls, name: str) -> "PathStyle":
        for style in (POSIX, WINDOWS):
            if style.name == name:
                return style
        raise ValueError(f"unknown path style: {name!r}")


POSIX = PathStyle(name="posix", separators=("/",), supports_drive=False)
WINDOWS = PathStyle(name="windows", separators=("\\", "/"), supports_drive=True)


__all__ = [
    "PathStyle",
    "POSIX",
    "WINDOWS",
]

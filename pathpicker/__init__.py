"""Public package surface for pathpicker.

Exports ``main`` for programmatic CLI invocation.
The browsing and completion engines live in ``pathpicker.directory_browser``
and ``pathpicker.open_path``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]

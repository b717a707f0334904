"""Persistent JSON config helpers.

Stores the hidden-file preference and preview behaviour toggles.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "pathpicker"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class PreviewSettings:
    """Preview behaviour consulted by the directory browser.

    ``live_preview`` previews the selected file while browsing;
    ``preview_tabs`` opens confirmed files as replaceable preview tabs.
    """

    live_preview: bool = True
    preview_tabs: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_bool(key: str, default: bool) -> bool:
    """Read a boolean value, ignoring anything that is not a real bool."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def _save_bool(key: str, value: bool) -> None:
    config = load_config()
    config[key] = bool(value)
    save_config(config)


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    return _load_bool("show_hidden", False)


def save_show_hidden(show_hidden: bool) -> None:
    """Persist hidden-file visibility preference as a boolean."""
    _save_bool("show_hidden", show_hidden)


def load_preview_settings() -> PreviewSettings:
    """Load preview toggles, defaulting each malformed key independently."""
    return PreviewSettings(
        live_preview=_load_bool("live_preview", True),
        preview_tabs=_load_bool("preview_tabs", True),
    )


def save_preview_settings(settings: PreviewSettings) -> None:
    """Persist both preview toggles."""
    config = load_config()
    config["live_preview"] = bool(settings.live_preview)
    config["preview_tabs"] = bool(settings.preview_tabs)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "PreviewSettings",
    "load_config",
    "save_config",
    "load_show_hidden",
    "save_show_hidden",
    "load_preview_settings",
    "save_preview_settings",
]

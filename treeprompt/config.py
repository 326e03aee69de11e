"""Persistent JSON config holding the user's prompt defaults.

Stores hidden-file visibility, page size, and theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "treeprompt"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config dir never breaks
    the prompt.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_allow_dot_files() -> bool:
    """Return persisted dotfile visibility; only explicit booleans count."""
    value = load_config().get("allow_dot_files")
    return value if isinstance(value, bool) else False


def load_page_size() -> int | None:
    """Return persisted page size, or ``None`` unless it is a positive int."""
    value = load_config().get("page_size")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def save_defaults(allow_dot_files: bool, page_size: int, theme: str | None) -> None:
    """Persist prompt defaults, keeping unrelated keys in the config file."""
    config = load_config()
    config["allow_dot_files"] = bool(allow_dot_files)
    config["page_size"] = max(1, int(page_size))
    if theme:
        config["theme"] = theme
    save_config(config)

"""YAML-based configuration for glyph.

A single global config file lives at ``$XDG_CONFIG_HOME/glyph/config.yaml``
(``~/.config/glyph/config.yaml`` by default). Missing keys fall back to
DEFAULT_CONFIG; a missing or unreadable file means all defaults.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from rich_menu import Theme

DEFAULT_CONFIG: dict[str, Any] = {
    "default_parent": "main",
    "debug": False,
    "viewport": {
        "chrome_rows": 6,
        "min_rows": 5,
    },
}


def get_config_dir() -> Path:
    """Get the glyph config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "glyph"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config() -> dict[str, Any]:
    """Load the config merged over DEFAULT_CONFIG."""
    config_path = get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            return copy.deepcopy(DEFAULT_CONFIG)
        return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError):
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(cfg: dict[str, Any]) -> None:
    """Save the config file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(cfg, f, default_flow_style=False, sort_keys=False)


def is_debug(cfg: dict[str, Any] | None = None) -> bool:
    """Debug logging is on via config or the GLYPH_DEBUG env var."""
    if os.environ.get("GLYPH_DEBUG", "").strip() not in ("", "0"):
        return True
    if cfg is None:
        cfg = load_config()
    return bool(cfg.get("debug", False))


def build_theme(cfg: dict[str, Any] | None = None) -> Theme:
    """Theme with the viewport layout taken from config."""
    if cfg is None:
        cfg = load_config()
    viewport = cfg.get("viewport")
    if not isinstance(viewport, dict):
        viewport = {}
    defaults = DEFAULT_CONFIG["viewport"]
    try:
        chrome_rows = int(viewport.get("chrome_rows", defaults["chrome_rows"]))
        min_rows = int(viewport.get("min_rows", defaults["min_rows"]))
    except (TypeError, ValueError):
        chrome_rows, min_rows = defaults["chrome_rows"], defaults["min_rows"]
    return Theme(chrome_rows=max(0, chrome_rows), min_visible_rows=max(1, min_rows))

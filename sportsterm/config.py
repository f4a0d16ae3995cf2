"""User configuration.

Read once at startup from ``./sportsterm_config.json`` or
``~/.config/sportsterm/config.json`` and frozen into ``Settings``. The theme
only ever reaches the renderer.
"""

import json
import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_PATHS = (
    Path.cwd() / "sportsterm_config.json",
    Path(os.path.expanduser("~/.config/sportsterm/config.json")),
)


class ConfigError(ValueError):
    """A config value has the wrong type or is out of range."""


@dataclass(frozen=True)
class Theme:
    primary: str = "#7C3AED"
    accent: str = "#F59E0B"
    live: str = "#EF4444"
    text: str = "#E5E7EB"
    dim: str = "#9CA3AF"


DARK = Theme()
LIGHT = Theme(primary="#5B21B6", accent="#B45309", live="#B91C1C", text="#111827", dim="#6B7280")
THEMES = {"dark": DARK, "light": LIGHT}


@dataclass(frozen=True)
class Settings:
    theme_name: str = "dark"
    theme: Theme = field(default=DARK)
    refresh_interval: float = 30.0
    fetch_timeout: float = 10.0
    auto_refresh: bool = True
    max_stats: int = 12


def load_config(paths=CONFIG_PATHS) -> dict:
    """Load the first readable JSON config file, or an empty dict."""
    for p in paths:
        try:
            if p.is_file():
                data = json.loads(p.read_text(encoding="utf-8")) or {}
                if isinstance(data, dict):
                    logger.debug("Loaded config from %s", p)
                    return data
                logger.warning("Ignoring %s: top level is not an object", p)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", p, e)
            continue

    return {}


def _positive_number(raw: dict, key: str, default: float) -> float:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{key} must be a positive number, got {value!r}")
    return float(value)


def build_theme(name: str, overrides: Optional[dict] = None) -> Theme:
    if name not in THEMES:
        raise ConfigError(f"theme must be one of {sorted(THEMES)}, got {name!r}")
    theme = THEMES[name]
    if overrides:
        known = {f.name for f in fields(Theme)}
        unknown = set(overrides) - known
        if unknown:
            logger.warning("Ignoring unknown colors: %s", sorted(unknown))
        theme = replace(theme, **{k: str(v) for k, v in overrides.items() if k in known})
    return theme


def settings_from_dict(raw: dict) -> Settings:
    theme_name = raw.get("theme", "dark")
    colors = raw.get("colors") or {}
    if not isinstance(colors, dict):
        raise ConfigError("colors must be an object")

    max_stats = raw.get("max_stats", 12)
    if isinstance(max_stats, bool) or not isinstance(max_stats, int) or max_stats < 0:
        raise ConfigError(f"max_stats must be a non-negative integer, got {max_stats!r}")

    auto_refresh = raw.get("auto_refresh", True)
    if not isinstance(auto_refresh, bool):
        raise ConfigError(f"auto_refresh must be true or false, got {auto_refresh!r}")

    return Settings(
        theme_name=theme_name,
        theme=build_theme(theme_name, colors),
        refresh_interval=_positive_number(raw, "refresh_interval", 30.0),
        fetch_timeout=_positive_number(raw, "fetch_timeout", 10.0),
        auto_refresh=auto_refresh,
        max_stats=max_stats,
    )

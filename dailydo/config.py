"""
Configuration loading for dailydo.

Settings live in args/dailydo.yaml under a top-level ``dailydo`` key. Anything
missing from the file falls back to DEFAULT_CONFIG, so a fresh checkout works
without any configuration at all.

Usage:
    from dailydo.config import load_config, get_section

    config = load_config()
    snooze = get_section("tasks")["snooze_minutes"]
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from dailydo import CONFIG_PATH


logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "timezone": None,
    "parser": {
        "default_hour": 12,
        "forward_dates": False,
        "day_parts": {
            "morning": 9,
            "afternoon": 14,
            "evening": 18,
            "night": 20,
        },
    },
    "tasks": {
        "snooze_minutes": 30,
        "incoming_limit": 3,
        "recent_achievements_limit": 5,
    },
    "reminders": {
        "inactive_after_days": 3,
        "message": "You have {count} pending tasks. Stay productive!",
    },
    "achievements": {
        "catalog_path": None,
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML, merged over the defaults."""
    config_path = Path(path) if path is not None else CONFIG_PATH
    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    section = raw.get("dailydo", {}) if isinstance(raw, dict) else raw
    section = section or {}
    if not isinstance(section, dict):
        logger.warning("Ignoring malformed config in %s", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    return _deep_merge(DEFAULT_CONFIG, section)


def get_section(name: str, path: Path | None = None) -> dict[str, Any]:
    """Return one top-level section of the configuration."""
    return load_config(path).get(name) or {}


__all__ = ["DEFAULT_CONFIG", "get_section", "load_config"]

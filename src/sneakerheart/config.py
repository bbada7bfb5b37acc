# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from sneakerheart.constants import DEFAULT_HOTKEYS, DEFAULT_SETTINGS_FILE, EXPECTED_ITEM_COUNT
from sneakerheart.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "swipe": {"threshold": 0.3, "animation_ms": 500, "spring_back_ms": 300},
    "splash": {"min_seconds": 2.0},
    "catalog": {"data_file": "", "assets_dir": "", "expected_count": EXPECTED_ITEM_COUNT},
    "session": {"flag_file": str(Path.home() / ".sneakerheart" / "session.json")},
    "email_sink": {"url": "", "anon_key": "USE_ENV_FILE", "table": "emails", "timeout_seconds": 10.0},
    "completion": {"promo_code": "SNEAKERS_HEART", "link_url": "https://drifters.com.ar"},
    "preload": {"ahead": 2},
    "hotkeys": deepcopy(DEFAULT_HOTKEYS),
}


SINK_ENV_KEYS = {"url": "SUPABASE_URL", "anon_key": "SUPABASE_ANON_KEY"}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge `override` into a copy of `base`; nested sections merge key by key."""
    merged = deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        merged[key] = _deep_merge(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return merged


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Read KEY=VALUE lines; blank lines and # comments are skipped."""
    if not env_path.is_file():
        return {}
    values: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        values[key] = _unquote(value.strip())
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Fill the email sink from .env values, then from the process environment."""
    merged = deepcopy(config)
    sink = merged.setdefault("email_sink", {})
    for field, env_name in SINK_ENV_KEYS.items():
        value = (env_values.get(env_name) or os.environ.get(env_name, "")).strip()
        if value:
            sink[field] = value
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the swipe loop and the email gate depend on."""
    swipe = config.get("swipe", {})
    threshold = swipe.get("threshold")
    if not isinstance(threshold, (float, int)) or float(threshold) < 0:
        raise ConfigError("swipe.threshold must be a number >= 0")

    animation_ms = swipe.get("animation_ms")
    if not isinstance(animation_ms, int) or animation_ms <= 0:
        raise ConfigError("swipe.animation_ms must be a positive int")

    spring_back_ms = swipe.get("spring_back_ms")
    if not isinstance(spring_back_ms, int) or spring_back_ms < 0:
        raise ConfigError("swipe.spring_back_ms must be an int >= 0")

    timeout = config.get("email_sink", {}).get("timeout_seconds")
    if not isinstance(timeout, (float, int)) or not (0 < float(timeout) <= 120):
        raise ConfigError("email_sink.timeout_seconds must be in range (0, 120]")

    expected = config.get("catalog", {}).get("expected_count")
    if not isinstance(expected, int) or expected < 1:
        raise ConfigError("catalog.expected_count must be a positive int")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    if not config_path.exists():
        return _apply_env_overrides(get_default_config(), env_values)

    try:
        loaded = read_json_file(config_path)
    except ValueError as exc:
        raise ConfigError(f"Unreadable settings file {config_path}: {exc}") from exc
    merged = _deep_merge(get_default_config(), loaded)
    merged = _apply_env_overrides(merged, env_values)
    validate_config(merged)
    return merged


def _strip_secrets(config: dict[str, Any]) -> dict[str, Any]:
    """Replace the sink key with the .env placeholder before saving to disk."""
    config_copy = deepcopy(config)
    sink = config_copy.get("email_sink", {})
    if sink.get("anon_key"):
        sink["anon_key"] = "USE_ENV_FILE"
    return config_copy


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON, without the sink key.

    The key belongs in the .env file next to settings.json.
    """
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, _strip_secrets(config))
    return config_path

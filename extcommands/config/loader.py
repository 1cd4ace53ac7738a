"""Settings loader for extcommands.

Loads settings from a JSON or YAML file and the environment:
- ${ENV_VAR} substitution inside string values
- EXTCOMMANDS_* environment variables override file values
- the parsed result is validated through CommandsSettings and cached
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml

from .schema import CommandsSettings

logger = logging.getLogger(__name__)

_cached_settings: Optional[CommandsSettings] = None
_cached_path: Optional[Path] = None

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")

ENV_PREFIX = "EXTCOMMANDS_"

_BOOL_TRUE = {"1", "true", "yes", "on"}


def _substitute_env_vars(obj: Any) -> Any:
    """Recursively replace ${VAR} with os.environ values (unknown tokens are kept)."""
    if isinstance(obj, str):

        def _replace(m: re.Match) -> str:
            return os.environ.get(m.group(1), m.group(0))

        return _ENV_VAR_RE.sub(_replace, obj)
    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_substitute_env_vars(v) for v in obj]
    return obj


def _env_overrides() -> dict[str, Any]:
    """Collect EXTCOMMANDS_* overrides for the known settings fields."""
    overrides: dict[str, Any] = {}
    for name, field in CommandsSettings.model_fields.items():
        raw = os.environ.get(ENV_PREFIX + name.upper())
        if raw is None:
            continue
        if field.annotation is bool:
            overrides[name] = raw.strip().lower() in _BOOL_TRUE
        elif name == "extensions_dirs":
            overrides[name] = [p for p in raw.split(os.pathsep) if p]
        else:
            overrides[name] = raw
    return overrides


def get_settings_path(settings_path: Optional[str | Path] = None) -> Optional[Path]:
    """Resolve the settings file, searching well-known locations when none is given."""
    if settings_path:
        return Path(settings_path)

    candidates = [
        Path.cwd() / "extcommands.json",
        Path.cwd() / "extcommands.yaml",
        Path.cwd() / "extcommands.yml",
        Path.home() / ".extcommands" / "config.json",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def load_settings_raw(path: Path) -> dict[str, Any]:
    """Parse a settings file (JSON or YAML by suffix) and substitute env vars."""
    raw = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        obj = yaml.safe_load(raw) or {}
    else:
        obj = json.loads(raw)
    obj = _substitute_env_vars(obj)
    return obj if isinstance(obj, dict) else {}


def load_settings(settings_path: Optional[str | Path] = None) -> CommandsSettings:
    """Load settings, reusing the in-process cache when it was loaded from the same file.

    Args:
        settings_path: Optional path to a JSON or YAML settings file.

    Returns:
        CommandsSettings (defaults when no file is found or it is invalid)
    """
    global _cached_settings, _cached_path

    path = get_settings_path(settings_path)

    if _cached_settings is not None and _cached_path == path:
        return _cached_settings

    settings_dict: dict[str, Any] = {}

    if path and path.exists():
        try:
            settings_dict = load_settings_raw(path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.warning(f"Failed to load settings from {path}: {exc}")

    settings_dict.update(_env_overrides())

    try:
        settings = CommandsSettings(**settings_dict)
    except ValueError as exc:
        logger.warning(f"Invalid settings, using defaults: {exc}")
        settings = CommandsSettings()

    _cached_settings = settings
    _cached_path = path
    return settings


def invalidate_settings_cache() -> None:
    """Drop the cached settings so the next load_settings() re-reads disk."""
    global _cached_settings, _cached_path
    _cached_settings = None
    _cached_path = None

"""User configuration for the ANSI demo.

Settings are read once at startup from a JSON file in the user's config
directory. Environment variables override file values. Anything that
cannot be read or parsed is logged and replaced with the default, so a bad
settings file never keeps the demo from starting.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import DemoConstants

logger = logging.getLogger(__name__)

APP_NAME = "ansi-demo"

# Environment variable -> config field
ENV_OVERRIDES = {
    "ANSI_DEMO_PACE": "pace",
    "ANSI_DEMO_LOG_LEVEL": "log_level",
    "ANSI_DEMO_LOG_FILE": "log_file",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DemoConfig:
    """Runtime settings for a demo session."""
    pace: float = 1.0  # Multiplier for pacing delays; 0 disables waits
    title: str = DemoConstants.APP_TITLE
    restore_title: str = DemoConstants.RESTORE_TITLE
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def default_config_path() -> Path:
    """Return the platform-appropriate settings file path."""
    return Path(platformdirs.user_config_dir(APP_NAME)) / "settings.json"


def _load_file(path: Path) -> Dict[str, Any]:
    """Load raw settings from disk, returning an empty dict on any problem."""
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def _coerce(name: str, value: Any) -> Any:
    """Validate a single setting, raising ValueError when it is unusable."""
    if name == "pace":
        pace = float(value)
        if pace < 0:
            raise ValueError("pace must not be negative")
        return pace
    if name == "log_level":
        level = str(value).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level
    if name == "log_file":
        return str(value) if value else None
    return str(value)


def load_config(path: Optional[Path] = None,
                environ: Optional[Dict[str, str]] = None) -> DemoConfig:
    """Build a DemoConfig from the settings file and environment.

    Args:
        path: Settings file to read (defaults to the user config dir)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        The merged configuration. Unknown keys and invalid values are
        logged and ignored.
    """
    raw = _load_file(path or default_config_path())
    env = os.environ if environ is None else environ
    for var, name in ENV_OVERRIDES.items():
        if var in env:
            raw[name] = env[var]

    known = {f.name for f in fields(DemoConfig)}
    values: Dict[str, Any] = {}
    for name, value in raw.items():
        if name not in known:
            logger.warning(f"Ignoring unknown setting {name!r}")
            continue
        try:
            values[name] = _coerce(name, value)
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid value for {name!r}: {e}; using default")
    return replace(DemoConfig(), **values)

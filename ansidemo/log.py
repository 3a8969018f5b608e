"""Logging setup.

The terminal belongs to the demo while it runs, so records are written to a
file when one is configured and dropped otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import platformdirs

from .config import APP_NAME, DemoConfig

PACKAGE_LOGGER = "ansidemo"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_path(log_file: str) -> Path:
    """Resolve a relative log file name under the user log directory."""
    path = Path(log_file).expanduser()
    if not path.is_absolute():
        path = Path(platformdirs.user_log_dir(APP_NAME)) / path
    return path


def configure_logging(config: DemoConfig) -> Optional[Path]:
    """Attach a handler to the package logger.

    Returns:
        The log file path, or None when logging is discarded.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(config.log_level)
    # Keep records away from the terminal the demo is drawing on
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if not config.log_file:
        root.addHandler(logging.NullHandler())
        return None

    path = resolve_log_path(config.log_file)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding='utf-8')
    except OSError:
        root.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return path

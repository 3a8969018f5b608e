"""ANSI demo entry point.

Allows running via `python -m ansidemo` and provides the console script
defined in `pyproject.toml`. The demo takes no command-line arguments.
"""

from __future__ import annotations

import logging

from .config import load_config
from .log import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    log_path = configure_logging(config)
    if log_path is not None:
        logger.info("Logging to %s", log_path)

    # Lazy import so configuration problems are logged before the UI starts
    from .app import DemoApp
    DemoApp(config=config).run()


if __name__ == "__main__":  # pragma: no cover
    main()

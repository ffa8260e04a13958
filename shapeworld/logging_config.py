"""Logging setup for the command-line tools.

Library modules only create their own ``logging.getLogger(__name__)``; the
level and output format are decided once, here, by the entry point.
"""

from __future__ import annotations

import logging
import os

from shapeworld.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LOG_LEVEL_ENV_VAR = "SHAPEWORLD_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Route log records to stderr and set the ``shapeworld`` logger level.

    Args:
        level: Level name such as ``"debug"``. Falls back to
            ``SHAPEWORLD_LOG_LEVEL``, then INFO.

    Returns:
        The package logger.

    Raises:
        ConfigurationError: If the level name is not a logging level
    """
    name = (level or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ConfigurationError(f"Unknown log level {name!r}")

    logging.basicConfig(level=numeric, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    package_logger = logging.getLogger("shapeworld")
    package_logger.setLevel(numeric)
    return package_logger

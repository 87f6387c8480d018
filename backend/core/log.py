"""
Logging setup for scripts.

Library modules only call logging.getLogger(__name__); handlers are attached
here, once, on the package logger.
"""

from __future__ import annotations

import logging
import sys

from .config import get_settings

LOGGER_NAME = "backend"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Calling it again only updates the level. stdout is left alone so that it
    carries nothing but the rendered records.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level or get_settings().log_level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger

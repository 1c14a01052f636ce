"""Logging configuration for rnstyle."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "rnstyle"

VERBOSITY_SILENT = 0  # Only errors and warnings
VERBOSITY_INFO = 1
VERBOSITY_DEBUG = 2


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the rnstyle logger, or one of its children when name is given."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the rnstyle logger with a verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=warnings and errors, 1=info, 2=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()

    level_map = {
        VERBOSITY_SILENT: logging.WARNING,
        VERBOSITY_INFO: logging.INFO,
        VERBOSITY_DEBUG: logging.DEBUG,
    }
    logger.setLevel(level_map.get(min(verbosity, VERBOSITY_DEBUG), logging.WARNING))

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

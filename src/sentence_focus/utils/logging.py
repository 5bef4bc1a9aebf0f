"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow optional verbose/debug mode.

Public contracts:
    - `get_logger(name)`: Return a logger below the package logger.
    - `configure_logging(verbose)`: Attach a single stderr handler.

Notes/Edge cases:
    - Configuration is idempotent: repeated calls leave a single handler,
      rebound to the current ``sys.stderr``.
    - Library code never configures handlers on import.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "sentence_focus"
_HANDLER_NAME = "sentence_focus.stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger to write to stderr.

    ``verbose`` switches the level from ``WARNING`` to ``DEBUG``.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


__all__ = ["PACKAGE_LOGGER", "get_logger", "configure_logging"]

"""Runtime options read from the environment."""
from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

_DEBUG_ENV = "SKIRMISH_DEBUG"
_LOG_LEVEL_ENV = "SKIRMISH_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = logging.WARNING
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def debug_enabled() -> bool:
    """Return True only when SKIRMISH_DEBUG is explicitly set to '1'."""
    return os.getenv(_DEBUG_ENV) == "1"


def get_log_level() -> int:
    """Resolve the logging level from the environment."""
    if debug_enabled():
        return logging.DEBUG
    raw = os.getenv(_LOG_LEVEL_ENV)
    if raw is None:
        return _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else _DEFAULT_LOG_LEVEL


def configure_logging(stream: TextIO | None = None) -> None:
    """Send package logs to stderr so stdout only carries descriptions."""
    logger = logging.getLogger("skirmish")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(get_log_level())
    logger.propagate = False

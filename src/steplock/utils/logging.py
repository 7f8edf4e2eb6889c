"""Logging helpers with consistent formatting."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.logging import RichHandler

from steplock.utils.env import get_env


LOG_LEVEL_ENV = "STEPLOCK_LOG_LEVEL"


def level_from_env(default: int = logging.INFO) -> int:
    """Read ``STEPLOCK_LOG_LEVEL`` as a level name (``DEBUG``) or number (``10``)."""
    raw = get_env(LOG_LEVEL_ENV).upper()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def get_logger(name: str, level: Optional[int] = None, *, rich: bool = True) -> logging.Logger:
    """Configure and return a logger; the level defaults to ``STEPLOCK_LOG_LEVEL``."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    if level is None:
        level = level_from_env()
    logger.setLevel(level)

    if rich:
        handler: logging.Handler = RichHandler(
            level=level,
            markup=False,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(name)s %(levelname)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    logger.propagate = False
    return logger

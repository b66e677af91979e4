"""
Logging setup for theme_cart.

Usage:
    from theme_cart.log import get_logger
    logger = get_logger(__name__)

The library itself never installs handlers; entry points (the CLI and the
stub storefront script) call configure_logging() once.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_from_name(name: Optional[str]) -> int:
    level_name = (name or settings.log_level or "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Attach a handler to the root logger unless one already exists.
    Logs go to `stream`, stdout when not given.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_level_from_name(level))

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

"""Logging setup for the room_allocation logger hierarchy."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from room_allocation.utils.config import get_settings


PACKAGE_LOGGER_NAME = "room_allocation"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach one stderr handler to the package logger.

    Only the ``room_allocation`` hierarchy is configured so the root logger
    stays with the host process (uvicorn, pytest). stdout is never used: it
    carries the allocation output of the stream entry point.
    """

    global _handler
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        return package_logger

    resolved_level = (level or get_settings().log_level).upper()
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(resolved_level)
    _handler = handler
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the package hierarchy.

    Top-level modules (``main``, ``app``) are nested under the package name
    so they share its handler and level.
    """
    configure_logging()
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")

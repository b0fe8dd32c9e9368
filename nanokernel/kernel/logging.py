"""
Logging System - console logging for the kernel.

Provides a colored console handler on the ``nanokernel`` logger.
Nothing is configured on import; call :func:`setup_logging` explicitly.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

import colorlog

ROOT_LOGGER_NAME = "nanokernel"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


class KernelConsoleHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces instead of stacking handlers."""


def _build_formatter(fmt: str, datefmt: str, colored: bool) -> logging.Formatter:
    if not colored:
        return logging.Formatter(fmt, datefmt=datefmt)
    return colorlog.ColoredFormatter(
        "%(log_color)s" + fmt + "%(reset)s",
        datefmt=datefmt,
        log_colors=LOG_COLORS,
    )


def setup_logging(
    level: int | str = "WARNING",
    colored: bool = True,
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    stream: Any = None,
) -> logging.Logger:
    """
    Configure the ``nanokernel`` logger.

    Idempotent: a handler installed by an earlier call is replaced.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, KernelConsoleHandler):
            logger.removeHandler(handler)

    handler = KernelConsoleHandler(stream or sys.stderr)
    handler.setFormatter(_build_formatter(fmt, datefmt, colored))
    handler.setLevel(level)

    logger.setLevel(level)
    logger.addHandler(handler)
    return logger


def configure_from_settings(settings: Mapping[str, Any]) -> logging.Logger:
    """Configure logging from the ``logging`` section of the settings."""
    return setup_logging(
        level=settings.get("level", "WARNING"),
        colored=settings.get("colored", True),
        fmt=settings.get("format", "%(asctime)s [%(levelname)s] %(name)s: %(message)s"),
        datefmt=settings.get("datefmt", "%Y-%m-%d %H:%M:%S"),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the ``nanokernel`` namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

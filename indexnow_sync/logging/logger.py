# indexnow_sync/logging/logger.py
"""
Logging setup for indexnow-sync.

Modules grab a stdlib logger with get_logger(__name__). Nothing is printed
until configure_logging() attaches a Rich handler to the package root logger,
so library callers keep full control over their own logging tree.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "indexnow_sync"
LOG_PREFIX = "[indexnow]"

_HANDLER_ATTR = "_indexnow_sync_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    return logging.getLogger(name)


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Attach a RichHandler to the package logger and set its level.

    Safe to call repeatedly; the handler is installed once and only the
    level changes on later calls.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not any(getattr(h, _HANDLER_ATTR, False) for h in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)

    return root

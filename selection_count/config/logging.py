"""Structured logging setup. Read-only config; no business logic."""

import logging
import sys
from typing import Any

from selection_count.config.settings import get_settings

_NULL_LOGGER_NAME = "selection_count.null"


def configure_logging() -> None:
    """Configure structured logging for the application."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%dT%H:%M:%S"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Reduce noise from third parties
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def null_logger() -> logging.Logger:
    """Return a logger that drops every record. Default for the counting core."""
    logger = logging.getLogger(_NULL_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    logger.disabled = True
    return logger


def get_debug_logger(name: str, enabled: bool) -> logging.Logger:
    """Return the module logger when diagnostics are enabled, otherwise the null logger."""
    if enabled:
        return get_logger(name)
    return null_logger()


def log_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Build a dict suitable for logger.info(..., extra=...) for structured fields."""
    return {"extra": extra}

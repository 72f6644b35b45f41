"""Centralized logging configuration for the simulation."""

from __future__ import annotations

import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "BIOTS_LOG_LEVEL"


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure application logging with sensible defaults.

    Args:
        level: Optional explicit log level. Falls back to ``BIOTS_LOG_LEVEL`` env
            var or INFO when not provided.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The package logger (``biots``).
    """

    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV)
    resolved_level = (raw_level or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("biots")
    app_logger.setLevel(resolved_level)

    app_logger.debug("Logging configured", extra={"level": resolved_level, "format": format})
    return app_logger

"""Logger setup for the bigx package."""

from __future__ import annotations

import logging

from bigx.core.config import BigxSettings, get_settings

LOGGER_NAME = "bigx"


def configure_logging(settings: BigxSettings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())
    return logger

"""Structured logging setup.

Call ``configure_logging()`` once at application start. Libraries embedding the
validator may skip it and keep their own structlog configuration.
"""

import logging
from typing import Optional

import structlog

from password_validator.config import Settings, get_settings


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog processors and the minimum log level."""
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_from_name(settings.LOG_LEVEL)),
        cache_logger_on_first_use=False,
    )

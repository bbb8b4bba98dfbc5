"""Structured logging setup (structlog)."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import structlog

from form_validation.config.settings import LoggingSettings, get_settings


def configure_logging(settings: Optional[LoggingSettings] = None, **kwargs: Any) -> None:
    """
    Configure structlog for the application.

    Uses LoggingSettings (LOG_LEVEL, LOG_FORMAT) unless one is passed in.
    Extra keyword arguments are forwarded to structlog.configure.
    """
    settings = settings or get_settings().logging
    level = logging.getLevelName(settings.log_level)

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
        **kwargs,
    )

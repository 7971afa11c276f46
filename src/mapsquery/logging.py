"""Structured logging configuration."""

from __future__ import annotations

import logging
from typing import Any

import structlog

from mapsquery.settings import Settings

__all__ = ["configure_logging", "configure_logging_from_settings", "get_logger"]

_PACKAGE_LOGGER = "mapsquery"


def configure_logging(*, json_output: bool = True, level: str = "INFO") -> None:
    """Configure structlog, and route the package's stdlib loggers through it.

    Args:
        json_output: True for JSON (production), False for console (dev).
        level: Log level string.
    """
    numeric_level = logging.getLevelNamesMapping()[level.upper()]
    shared: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *shared,
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False


def configure_logging_from_settings(settings: Settings) -> None:
    configure_logging(json_output=settings.log_json, level=settings.log_level)


def get_logger(**kwargs: Any) -> structlog.BoundLogger:
    """Get a bound logger with optional initial context."""
    return structlog.get_logger(**kwargs)  # type: ignore[no-any-return]

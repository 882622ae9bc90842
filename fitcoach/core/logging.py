"""
Structured logging setup.

Engine and service modules log key=value events through structlog.
``configure_logging`` is called once at application start-up; until then
structlog's defaults apply (useful in tests).
"""

import logging
import sys
from typing import Any

import structlog

from fitcoach.core.config import settings


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure stdlib logging and structlog processors."""
    level_name = (level or ("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    use_json = settings.LOG_JSON if json_output is None else json_output

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    renderer = structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def get_logger(name: str) -> Any:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def add_log_context(**kwargs: Any) -> None:
    """Add context to all future log entries of the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()

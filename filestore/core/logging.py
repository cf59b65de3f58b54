"""Structured logging built on structlog."""
import logging
import sys
from typing import Any

import structlog

from filestore.core.config import settings


def setup_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """Configure process-wide structured logging.

    Args:
        level: Log level name (defaults to settings.log_level)
        json_format: Render JSON lines instead of console output
            (defaults to settings.log_json)
    """
    level_name = (level or settings.log_level).upper()
    use_json = settings.log_json if json_format is None else json_format

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name, logging.INFO),
    )

    renderer: Any
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger bound to ``name``."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key/value pairs to every log line in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all context-bound log fields."""
    structlog.contextvars.clear_contextvars()

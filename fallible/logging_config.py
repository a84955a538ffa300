"""Structured logging for fallible, built on structlog + rich.

The library itself only emits events; applications opt in to rendering by
calling :func:`setup_logging` once at startup.
"""

import logging
import sys

import structlog
from rich.traceback import install as install_rich_traceback

LOGGER_NAME = "fallible"


def _renderer(json_logs: bool) -> structlog.types.Processor:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.plain_traceback,
    )


def setup_logging(*, json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog output for applications using fallible.

    Args:
        json_logs: Emit one JSON object per event instead of coloured console lines.
        log_level: Minimum level to render (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper())

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
    else:
        install_rich_traceback(show_locals=False, width=120)
    processors.append(_renderer(json_logs))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def setup_logging_from_settings() -> None:
    """Configure logging from the ``FALLIBLE_*`` environment settings."""
    from fallible.config import settings

    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger, defaulting to the library's logger name."""
    return structlog.get_logger(name or LOGGER_NAME)

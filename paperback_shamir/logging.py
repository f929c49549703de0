"""structlog setup for applications embedding paperback_shamir."""

from __future__ import annotations

import logging
import sys

import structlog

from paperback_shamir.config import Config


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog with a console or JSON renderer.

    Arguments default to ``Config().log_level`` / ``Config().log_format``.
    """
    config = Config()
    level = (level or config.log_level).upper()
    fmt = (fmt or config.log_format).lower()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    renderer: structlog.types.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    elif fmt == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    else:
        raise ValueError(f"Unknown log format: {fmt!r}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

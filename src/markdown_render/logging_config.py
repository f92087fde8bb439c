"""
structlog setup for the CLI.

Logs always go to stderr so ``--stdout`` output stays a clean HTML document.
"""
import logging
import sys

import structlog

from .config import LogFormat


def configure_logging(level: str = "WARNING", fmt: LogFormat = LogFormat.CONSOLE) -> None:
    """Configure structlog with a level filter and a console or JSON renderer."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == LogFormat.JSON
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

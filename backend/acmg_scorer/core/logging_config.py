"""
structlog setup shared by the CLI and the HTTP application.
Events are rendered to stderr so stdout only carries scoring reports.
"""
import logging
import sys

import structlog

from .config import settings


def configure_logging(log_level: str = "WARNING") -> None:
    """Configure structlog once at start-up."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """
    structlog logger for a module. Falls back to the settings level when
    nothing configured structlog yet, since its defaults print to stdout.
    """
    if not structlog.is_configured():
        configure_logging(settings.log_level)
    return structlog.get_logger(name)

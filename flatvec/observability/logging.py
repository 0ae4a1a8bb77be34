"""Structured logging configuration using structlog.

JSON output for machine consumption, console output for development.
Log events go to stderr so stdout stays free for command output.
"""

import sys
from typing import Any, cast

import structlog

from flatvec.config.models.observability import LoggingConfig

LEVELS: dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


def setup_logging(level: str = "INFO", format: str = "json") -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "json" or "console"
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LEVELS.get(level.upper(), 20)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        # Loggers are created at import time; reconfiguring must reach them
        cache_logger_on_first_use=False,
    )


def configure_from_settings(config: LoggingConfig) -> None:
    """Configure logging from the observability.logging settings section."""
    setup_logging(level=config.level, format=config.format)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))

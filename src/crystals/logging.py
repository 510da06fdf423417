"""Logging configuration for Dragons & Crystals.

Game text owns stdout, so log output goes to stderr or a file.
"""

import sys
from pathlib import Path
from typing import Any

import structlog

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}
DEFAULT_LEVEL = "WARNING"


def configure_logging(
    log_level: str = DEFAULT_LEVEL,
    log_file: Path | None = None,
    json_logs: bool = False,
) -> None:
    """Configure structured logging for the game.

    An unrecognised level falls back to WARNING and says so, since a typo
    in CRYSTALS_LOG_LEVEL would otherwise hide the logs being asked for.
    """
    if log_file:
        output_stream = open(log_file, "a")
    else:
        output_stream = sys.stderr

    level = LEVELS.get(log_level.strip().upper())

    base_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
    ]

    if json_logs:
        processors = base_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = base_processors + [
            structlog.dev.ConsoleRenderer(colors=output_stream.isatty())
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            level if level is not None else LEVELS[DEFAULT_LEVEL]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )

    if level is None:
        get_logger(__name__).warning(
            "unknown_log_level", log_level=log_level, using=DEFAULT_LEVEL
        )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)

"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format on stderr.
A process-wide minimum level can be applied from runtime config.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured JSON output.
    """
    if not structlog.is_configured():
        configure_log_level(DEFAULT_LOG_LEVEL)
    return structlog.get_logger(name)


def configure_log_level(level: str) -> None:
    """Configure structlog processors and minimum level.

    Args:
        level: Level name such as ``INFO`` or ``DEBUG``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def _stderr_logger_factory(*_args: object) -> structlog.PrintLogger:
    """Create a print logger bound to the current stderr stream."""
    return structlog.PrintLogger(sys.stderr)


def _level_number(level: str) -> int:
    """Map a level name onto its stdlib logging number."""
    return int(logging.getLevelName(level.upper()))

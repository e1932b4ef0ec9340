"""Structured logging setup for the FSx for Windows constructs.

The constructs only emit debug events through module-level structlog
loggers; applications decide the level and format by calling
configure_logging once before synthesis.
"""
import logging
import sys
from typing import Any, List

import structlog


def configure_logging(*, log_level: str = "INFO", json_format: bool = False) -> None:
    """Configure structlog for a CDK app.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output JSON lines. If False, output human-readable.

    Output goes to stderr so it never mixes with synthesized output on stdout.
    """
    processors: List[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

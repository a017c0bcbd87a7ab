"""Structlog configuration for the gateway.

Configures structlog with colored console output for development
and JSON output for production.
"""

import os
import sys

import structlog


def configure_logging(json_output: bool | None = None) -> None:
    """Configure structlog with appropriate processors.

    Args:
        json_output: Force JSON (True) or console (False) rendering. When
            None, colored console output is used if FORCE_COLOR is set or
            stdout is a TTY, and JSON otherwise.
    """
    if json_output is None:
        force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
        json_output = not (force_color or sys.stdout.isatty())

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

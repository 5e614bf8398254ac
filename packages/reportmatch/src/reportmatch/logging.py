"""Logging configuration for reportmatch."""

import logging
import os

import structlog


def configure_logging(level: str | None = None) -> None:
    """Send structlog events through stdlib logging as plain console lines.

    The matching core only emits debug events (rank_done, preview_done, ...),
    so the CLI's default WARNING level keeps them out of command output.
    Calling this again replaces the previous root handlers, which lets
    repeated CLI invocations in one process pick up the current stderr.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). If None, reads from
               LOG_LEVEL env var, defaulting to INFO.
    """
    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    # Route structlog through stdlib logging so level filtering applies
    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

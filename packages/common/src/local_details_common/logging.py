"""Structured logging setup.

Logs are written to stderr so that stdout only carries the document.
"""

from __future__ import annotations

import logging
import sys

import structlog


def _stderr_logger(*args) -> structlog.PrintLogger:
    # Resolved per call: sys.stderr may be swapped after configuration.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING", fmt: str = "console") -> None:
    """Configure structlog for the CLI.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: "console" for human-readable lines, "json" for one JSON object per line
    """
    renderer: structlog.typing.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None):
    """Return a lazy logger; configuration is resolved on each call."""
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()

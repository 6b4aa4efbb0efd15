"""
Structured logging setup.

Diagnostics go to stderr through the standard library so they never mix with
the report printed on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = ("configure_logging", "get_logger")

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.dev.ConsoleRenderer(colors=False),
]


def configure_logging(level: str = "WARNING") -> None:
    """Send diagnostics at ``level`` and above to stderr."""
    # force=True rebinds the handler to the current sys.stderr on every run
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structlog logger bound to the stdlib logger ``name``.

    The processor chain is attached here rather than through global structlog
    state, so importing the package leaves a host's structlog setup alone.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )

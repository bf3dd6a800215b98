"""
Logging setup for command-line entry points.

Library modules only create module loggers (logging.getLogger(__name__));
the root logger is configured once, by the entry point, through
configure_logging().
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(name: str) -> int:
    """
    Map a level name (case-insensitive) to its logging constant.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS
    """
    upper = name.strip().upper()
    if upper not in LOG_LEVELS:
        raise ValueError(f"unknown log level {name!r} (expected one of {', '.join(LOG_LEVELS)})")
    level: int = getattr(logging, upper)
    return level


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure the root logger to write to stderr.

    stdout is reserved for the report, so diagnostics never interleave with it.
    Calling this again replaces the previous configuration.
    """
    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )

"""
Helpers package.
"""

from .dto import FeedStats, LineParseResult, ParseStats, PipelineResult, Record, TimingsConfig
from .duration_helper import Duration, format_duration, parse_duration
from .exceptions import (
    ConfigurationError,
    DurationParseError,
    InputReadError,
    RankIndexError,
    WorkerFailedError,
)
from .logging_helper import configure_logging, resolve_log_level

__all__ = [
    "ConfigurationError",
    "Duration",
    "DurationParseError",
    "FeedStats",
    "InputReadError",
    "LineParseResult",
    "ParseStats",
    "PipelineResult",
    "RankIndexError",
    "Record",
    "TimingsConfig",
    "WorkerFailedError",
    "configure_logging",
    "format_duration",
    "parse_duration",
    "resolve_log_level",
]

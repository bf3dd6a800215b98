"""
Data transfer objects shared across layers.
"""

from .config_dto import TimingsConfig
from .timing_dto import FeedStats, LineParseResult, LineStatus, ParseStats, PipelineResult, Record

__all__ = [
    "FeedStats",
    "LineParseResult",
    "LineStatus",
    "ParseStats",
    "PipelineResult",
    "Record",
    "TimingsConfig",
]

"""
Timing domain DTOs.

Data transfer objects passed between the parser, the pipeline stages and the
CLI report.

Rules:
- Import only stdlib, typing and cmdtimes.helpers (no upward imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from cmdtimes.helpers.duration_helper import Duration

LineStatus = Literal["accepted", "not_measurement", "invalid_duration"]


@dataclass(frozen=True)
class Record:
    """
    One parsed measurement line.

    Attributes:
        label: Text before the final " -> " separator (untrimmed)
        duration: Parsed trailing duration token
    """

    label: str
    duration: Duration


@dataclass(frozen=True)
class LineParseResult:
    """
    Outcome of parsing a single line.

    "not_measurement" is the silent no-match case (no separator);
    "invalid_duration" is the logged case (separator found, bad token).
    """

    status: LineStatus
    record: Record | None = None
    error: str | None = None


@dataclass
class ParseStats:
    """Counters kept by a single parse worker."""

    accepted: int = 0
    not_measurement: int = 0
    invalid_duration: int = 0

    def count(self, status: LineStatus) -> None:
        setattr(self, status, getattr(self, status) + 1)

    def merge(self, other: ParseStats) -> ParseStats:
        return ParseStats(
            accepted=self.accepted + other.accepted,
            not_measurement=self.not_measurement + other.not_measurement,
            invalid_duration=self.invalid_duration + other.invalid_duration,
        )


@dataclass
class FeedStats:
    """Counters kept by the input producer."""

    sent: int = 0
    prefiltered: int = 0
    too_long: int = 0


@dataclass
class PipelineResult:
    """Result from TimingPipelineService.collect_with_stats."""

    records: list[Record]
    feed: FeedStats = field(default_factory=FeedStats)
    parse: ParseStats = field(default_factory=ParseStats)

"""Ranking of collected records, longest duration first."""

from __future__ import annotations

from collections.abc import Iterable

from cmdtimes.helpers.dto.timing_dto import Record
from cmdtimes.helpers.exceptions import RankIndexError


def rank_records(records: Iterable[Record]) -> list[Record]:
    """
    Return a new list of records ordered by duration, longest first.

    The input is left untouched. Tie order is unspecified.
    """
    return sorted(records, key=lambda record: record.duration.nanoseconds, reverse=True)


def parse_rank_index(raw: str) -> int:
    """
    Parse a zero-based rank index argument.

    Raises:
        RankIndexError: If raw is not an integer
    """
    try:
        return int(raw)
    except ValueError as e:
        raise RankIndexError(f"failed to parse line number {raw!r}: not an integer") from e


def select_ranked(ranked: list[Record], index: int) -> Record:
    """
    Return the record at a zero-based rank index.

    Raises:
        RankIndexError: If index is outside 0 <= index < len(ranked)
    """
    if index < 0 or index >= len(ranked):
        raise RankIndexError(f"line out of bound, must be within 0 <= {index} < {len(ranked)}")
    return ranked[index]

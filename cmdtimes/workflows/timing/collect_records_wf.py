"""Aggregation workflow: drain the record channel into a list."""

from __future__ import annotations

from cmdtimes.components.pipeline.channel_comp import Channel
from cmdtimes.helpers.dto.timing_dto import Record


def collect_records_workflow(records_in: Channel[Record]) -> list[Record]:
    """
    Append every record received until records_in is closed and drained.

    Records arrive in no particular order.
    """
    records: list[Record] = []
    for record in records_in:
        records.append(record)
    return records

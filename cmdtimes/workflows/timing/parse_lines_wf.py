"""
Parse worker workflow.

The loop body of one parse worker: receive raw lines until the input channel
is closed and drained, forward accepted Records.
"""

from __future__ import annotations

from cmdtimes.components.pipeline.channel_comp import Channel
from cmdtimes.components.timing.line_parser_comp import parse_line
from cmdtimes.helpers.dto.timing_dto import ParseStats, Record


def parse_lines_workflow(lines_in: Channel[str], records_out: Channel[Record]) -> ParseStats:
    """
    Parse lines from lines_in and send accepted records to records_out.

    Returns when lines_in is closed and empty. Each line is parsed exactly
    once; rejected lines are dropped (invalid durations are logged by the
    parser).

    Returns:
        ParseStats for this worker
    """
    stats = ParseStats()
    for line in lines_in:
        result = parse_line(line)
        stats.count(result.status)
        if result.record is not None:
            records_out.send(result.record)
    return stats

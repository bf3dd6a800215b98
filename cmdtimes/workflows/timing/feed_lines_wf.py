"""
Input producer workflow.

Reads the text stream line by line and hands candidate measurement lines to
the parse workers. The caller owns the channel and closes it afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cmdtimes.components.pipeline.channel_comp import Channel
from cmdtimes.components.timing.line_parser_comp import might_be_measurement
from cmdtimes.helpers.dto.timing_dto import FeedStats
from cmdtimes.helpers.exceptions import InputReadError

logger = logging.getLogger(__name__)


def strip_line_terminator(raw: str) -> str:
    """Remove one trailing "\\n" or "\\r\\n"."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


def feed_lines_workflow(stream: Iterable[str], lines_out: Channel[str], max_line_length: int) -> FeedStats:
    """
    Send every candidate line of stream into lines_out.

    Lines longer than max_line_length characters are skipped whole, and lines
    failing the cheap "->" pre-filter never reach a worker.

    Args:
        stream: Text stream (e.g. sys.stdin) or any iterable of lines
        lines_out: Input channel of the parse workers (not closed here)
        max_line_length: Longest accepted line, in characters

    Returns:
        FeedStats with sent / prefiltered / too_long counts

    Raises:
        InputReadError: If reading the stream fails
    """
    stats = FeedStats()
    iterator = iter(stream)

    while True:
        try:
            raw = next(iterator)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"failed to scan: {e}") from e

        line = strip_line_terminator(raw)
        if len(line) > max_line_length:
            stats.too_long += 1
            continue
        if not might_be_measurement(line):
            stats.prefiltered += 1
            continue

        lines_out.send(line)
        stats.sent += 1

    if stats.too_long:
        logger.debug("[Feed] Skipped %d over-long line(s)", stats.too_long)
    return stats

"""
Timing pipeline service.
Wires producer, parse workers and collector together over two channels.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cmdtimes.components.pipeline.channel_comp import DEFAULT_CAPACITY, Channel
from cmdtimes.components.timing.rank_comp import rank_records
from cmdtimes.helpers.dto.config_dto import TimingsConfig
from cmdtimes.helpers.dto.timing_dto import PipelineResult, Record
from cmdtimes.services.record_collector_svc import RecordCollector
from cmdtimes.services.worker_pool_svc import ParseWorkerPool, WorkerPoolConfig
from cmdtimes.workflows.timing.feed_lines_wf import feed_lines_workflow

logger = logging.getLogger(__name__)


class TimingPipelineService:
    """
    Fan-out/fan-in parse pipeline.

        stream -> [lines] -> N parse workers -> [records] -> collector -> rank

    Shutdown order: the producer closes `lines` after the last input line,
    the pool joins every worker, `records` is closed, and only then does the
    collector hand over its list. A fatal read error closes `lines` and
    propagates at once; a failed worker surfaces as WorkerFailedError once
    the pool has drained. In both cases nothing is ranked or returned.
    """

    def __init__(self, cfg: TimingsConfig, channel_capacity: int = DEFAULT_CAPACITY):
        """
        Args:
            cfg: Runtime configuration (worker_count, max_line_length are used here)
            channel_capacity: Buffer size of both channels
        """
        self.cfg = cfg
        self.channel_capacity = channel_capacity

    def collect_with_stats(self, stream: Iterable[str]) -> PipelineResult:
        """
        Run the pipeline over stream and return the unranked records with stats.

        Raises:
            InputReadError: If reading stream fails
            WorkerFailedError: If a parse worker raised
        """
        lines: Channel[str] = Channel(self.channel_capacity, name="lines")
        records: Channel[Record] = Channel(self.channel_capacity, name="records")

        collector = RecordCollector(records)
        collector.start()

        pool = ParseWorkerPool(lines, records, WorkerPoolConfig(worker_count=self.cfg.worker_count))
        pool.start_workers()

        try:
            feed_stats = feed_lines_workflow(stream, lines, self.cfg.max_line_length)
        finally:
            # On a read error this only lets the worker threads exit
            lines.close()

        try:
            parse_stats = pool.wait_until_done()
        finally:
            # Lets the collector thread exit when a worker failed
            records.close()
        collected = collector.result()

        logger.info(
            "[Pipeline] %d lines sent to %d workers: %d records, %d invalid durations, %d non-measurement",
            feed_stats.sent,
            self.cfg.worker_count,
            parse_stats.accepted,
            parse_stats.invalid_duration,
            parse_stats.not_measurement,
        )
        return PipelineResult(records=collected, feed=feed_stats, parse=parse_stats)

    def collect(self, stream: Iterable[str]) -> list[Record]:
        """Run the pipeline and return the records in arrival order."""
        return self.collect_with_stats(stream).records

    def run(self, stream: Iterable[str]) -> list[Record]:
        """Run the pipeline and return the records ranked longest first."""
        return rank_records(self.collect(stream))

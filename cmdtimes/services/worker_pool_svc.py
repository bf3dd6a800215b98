"""
Worker pool service.
Parse worker pool: N threads draining the line channel into the record channel.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from functools import reduce

from cmdtimes.components.pipeline.channel_comp import Channel
from cmdtimes.helpers.dto.timing_dto import ParseStats, Record
from cmdtimes.helpers.exceptions import WorkerFailedError
from cmdtimes.workflows.timing.parse_lines_wf import parse_lines_workflow

logger = logging.getLogger(__name__)


def default_worker_count() -> int:
    """Number of CPUs available to this process (at least 1)."""
    return os.cpu_count() or 1


@dataclass
class WorkerPoolConfig:
    """Configuration for ParseWorkerPool."""

    worker_count: int


class ParseWorkerPool:
    """
    Fixed-size pool of parse worker threads.

    Workers share nothing but the two channels. Each one runs
    parse_lines_workflow() and exits once the line channel is closed and
    drained; the pool is done when every worker has exited.

    A worker that raises keeps draining the line channel without parsing, so
    the producer never blocks on a dead pool; wait_until_done() then raises.

    This service does NOT close either channel. The caller closes the line
    channel when input ends and the record channel after wait_until_done().
    """

    def __init__(
        self,
        lines_in: Channel[str],
        records_out: Channel[Record],
        cfg: WorkerPoolConfig,
        name: str = "ParsePool",
    ):
        """
        Initialize worker pool service.

        Args:
            lines_in: Channel of raw lines (shared by all workers)
            records_out: Channel accepted records are forwarded to
            cfg: Worker pool configuration (worker_count)
            name: Pool name for logging
        """
        if cfg.worker_count < 1:
            raise ValueError(f"worker_count must be >= 1, got {cfg.worker_count}")
        self.lines_in = lines_in
        self.records_out = records_out
        self.cfg = cfg
        self.name = name
        self.worker_pool: list[threading.Thread] = []
        # One slot per worker; each worker writes only its own slot
        self._stats: list[ParseStats | None] = []
        self._errors: list[BaseException | None] = []

    def _run_worker(self, worker_id: int) -> None:
        try:
            self._stats[worker_id] = parse_lines_workflow(self.lines_in, self.records_out)
        except Exception as e:
            logger.error(f"[{self.name}] Worker {worker_id} failed: {e}", exc_info=True)
            self._errors[worker_id] = e
            discarded = sum(1 for _ in self.lines_in)
            logger.warning(f"[{self.name}] Worker {worker_id} discarded {discarded} remaining line(s)")
            return
        logger.debug(f"[{self.name}] Worker {worker_id} finished: {self._stats[worker_id]}")

    def start_workers(self) -> list[threading.Thread]:
        """
        Start all workers in the pool.

        Returns:
            List of started worker threads
        """
        if self.worker_pool:
            logger.warning(f"[{self.name}] Workers already running")
            return self.worker_pool

        logger.info(f"[{self.name}] Starting {self.cfg.worker_count} workers")

        self._stats = [None] * self.cfg.worker_count
        self._errors = [None] * self.cfg.worker_count
        for i in range(self.cfg.worker_count):
            worker = threading.Thread(
                target=self._run_worker,
                args=(i,),
                name=f"{self.name}-{i}",
                daemon=True,
            )
            worker.start()
            self.worker_pool.append(worker)

        return self.worker_pool

    def wait_until_done(self) -> ParseStats:
        """
        Block until every worker has exited.

        Only returns once the line channel has been closed and drained.

        Returns:
            ParseStats summed over all workers

        Raises:
            WorkerFailedError: If any worker raised; the first error is chained
        """
        for worker in self.worker_pool:
            worker.join()

        logger.debug(f"[{self.name}] All workers exited")

        failures = [e for e in self._errors if e is not None]
        if failures:
            raise WorkerFailedError(
                f"{len(failures)} of {len(self.worker_pool)} parse worker(s) failed: {failures[0]}"
            ) from failures[0]
        return self.get_stats()

    def are_workers_running(self) -> bool:
        """
        Check if any workers are currently running.

        Returns:
            True if at least one worker is alive
        """
        return any(w.is_alive() for w in self.worker_pool)

    def get_stats(self) -> ParseStats:
        """Sum of the stats of every worker that has finished."""
        return reduce(ParseStats.merge, (s for s in self._stats if s is not None), ParseStats())

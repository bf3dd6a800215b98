"""
Record collector service.
Single aggregation point draining the record channel on its own thread.
"""

from __future__ import annotations

import logging
import threading

from cmdtimes.components.pipeline.channel_comp import Channel
from cmdtimes.helpers.dto.timing_dto import Record
from cmdtimes.workflows.timing.collect_records_wf import collect_records_workflow

logger = logging.getLogger(__name__)


class RecordCollector:
    """
    Runs collect_records_workflow() on a dedicated thread.

    Start it before the parse workers so no sender ever waits on a missing
    receiver. result() hands the finished collection over exactly once.
    """

    def __init__(self, records_in: Channel[Record], name: str = "Collector"):
        self.records_in = records_in
        self.name = name
        self._thread: threading.Thread | None = None
        self._records: list[Record] | None = None
        self._error: BaseException | None = None
        self._delivered = False

    def _run(self) -> None:
        try:
            self._records = collect_records_workflow(self.records_in)
        except Exception as e:
            logger.error(f"[{self.name}] Collection failed: {e}", exc_info=True)
            self._error = e

    def start(self) -> None:
        """Start draining the record channel."""
        if self._thread is not None:
            logger.warning(f"[{self.name}] Already started")
            return
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()

    def result(self) -> list[Record]:
        """
        Wait for the record channel to close and drain, then return the records.

        Raises:
            RuntimeError: If the collector was never started, the result was
                already delivered, or collection failed
        """
        if self._thread is None:
            raise RuntimeError(f"[{self.name}] result() called before start()")
        if self._delivered:
            raise RuntimeError(f"[{self.name}] result already delivered")

        self._thread.join()
        self._delivered = True

        if self._error is not None:
            raise RuntimeError(f"[{self.name}] collection failed") from self._error

        records = self._records or []
        self._records = None
        logger.debug(f"[{self.name}] Collected {len(records)} records")
        return records

"""
Unit tests for TimingPipelineService.

Tests validate the end-to-end properties of the parse pipeline:
- One record per valid measurement line, none for anything else
- Ranked output is non-increasing and independent of input order
- Repeated runs agree
- Read failures and worker failures propagate without hanging
"""

from __future__ import annotations

import logging
import random
import threading
from collections import Counter
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from cmdtimes.components.timing.line_parser_comp import parse_line
from cmdtimes.helpers.dto.config_dto import TimingsConfig
from cmdtimes.helpers.dto.timing_dto import LineParseResult, Record
from cmdtimes.helpers.duration_helper import MILLISECOND, SECOND, Duration
from cmdtimes.helpers.exceptions import InputReadError, WorkerFailedError
from cmdtimes.services.timing_pipeline_svc import TimingPipelineService

JOIN_TIMEOUT_S = 10


def _run_bounded(fn: Callable[..., Any], *args: Any) -> Any:
    """Call fn on a daemon thread; fail instead of hanging if it never returns."""
    outcome: dict[str, Any] = {}

    def target() -> None:
        try:
            outcome["value"] = fn(*args)
        except BaseException as e:
            outcome["error"] = e

    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    thread.join(timeout=JOIN_TIMEOUT_S)
    assert not thread.is_alive(), "pipeline did not finish"
    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]


def _mixed_lines(count: int) -> tuple[list[str], int]:
    """Generate a deterministic mix of line kinds; returns (lines, expected record count)."""
    rng = random.Random(1234)
    lines: list[str] = []
    expected = 0
    for i in range(count):
        kind = i % 5
        if kind == 0:
            lines.append(f"/usr/bin/cc -c src/file{i}.c -> {rng.randint(1, 5000)}ms")
            expected += 1
        elif kind == 1:
            lines.append(f"step {i} -> sub -> {rng.randint(1, 90)}s")
            expected += 1
        elif kind == 2:
            lines.append(f"plain output line {i}")
        elif kind == 3:
            lines.append(f"step {i} -> broken{i}")
        else:
            lines.append(f"arrow->without->spaces {i}")
    return lines, expected


class TestTimingPipelineService:
    """Tests for TimingPipelineService.run / collect."""

    @pytest.mark.unit
    def test_reference_example(self, example_lines: list[str], timings_config: TimingsConfig) -> None:
        ranked = TimingPipelineService(timings_config).run(example_lines)

        assert ranked == [
            Record("lint", Duration(2 * SECOND)),
            Record("build", Duration(1200 * MILLISECOND)),
            Record("test", Duration(500 * MILLISECOND)),
        ]

    @pytest.mark.unit
    def test_label_containing_separator(self, timings_config: TimingsConfig) -> None:
        ranked = TimingPipelineService(timings_config).run(["a -> b -> 3s"])

        assert ranked == [Record("a -> b", Duration(3 * SECOND))]

    @pytest.mark.unit
    def test_invalid_duration_is_dropped_and_logged(
        self, timings_config: TimingsConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            ranked = TimingPipelineService(timings_config).run(["build -> notaduration", "ok -> 1s"])

        assert [r.label for r in ranked] == ["ok"]
        assert "invalid duration 'notaduration'" in caplog.text

    @pytest.mark.unit
    @pytest.mark.parametrize("worker_count", [1, 2, 8])
    def test_record_count_matches_valid_lines(self, worker_count: int) -> None:
        lines, expected = _mixed_lines(1000)
        result = TimingPipelineService(TimingsConfig(worker_count=worker_count)).collect_with_stats(lines)

        assert len(result.records) == expected
        assert result.parse.accepted == expected
        assert result.parse.invalid_duration == 200
        assert result.feed.prefiltered == 200

    @pytest.mark.unit
    def test_ranking_is_non_increasing(self, timings_config: TimingsConfig) -> None:
        lines, _ = _mixed_lines(500)
        ranked = TimingPipelineService(timings_config).run(lines)

        assert all(a.duration >= b.duration for a, b in zip(ranked, ranked[1:]))

    @pytest.mark.unit
    def test_input_order_independent(self, timings_config: TimingsConfig) -> None:
        """Permuting input yields the same records and the same ranked durations."""
        lines, _ = _mixed_lines(500)
        shuffled = list(lines)
        random.Random(99).shuffle(shuffled)

        service = TimingPipelineService(timings_config)
        first = service.run(lines)
        second = service.run(shuffled)

        assert Counter(first) == Counter(second)
        assert [r.duration for r in first] == [r.duration for r in second]

    @pytest.mark.unit
    def test_repeated_runs_agree(self, timings_config: TimingsConfig) -> None:
        lines, _ = _mixed_lines(300)
        service = TimingPipelineService(timings_config)

        assert Counter(service.run(lines)) == Counter(service.run(lines))

    @pytest.mark.unit
    def test_empty_input(self, timings_config: TimingsConfig) -> None:
        assert TimingPipelineService(timings_config).run([]) == []

    @pytest.mark.unit
    def test_over_long_lines_skipped(self) -> None:
        cfg = TimingsConfig(worker_count=2, max_line_length=16)
        ranked = TimingPipelineService(cfg).run(["short -> 1s", "a-much-longer-label -> 2s"])

        assert [r.label for r in ranked] == ["short"]

    @pytest.mark.unit
    def test_read_error_propagates(self, timings_config: TimingsConfig) -> None:
        """A failing stream aborts the run with InputReadError instead of hanging."""

        def failing_stream() -> Iterator[str]:
            for i in range(50):
                yield f"job{i} -> {i}s\n"
            raise OSError("read failed")

        with pytest.raises(InputReadError, match="read failed"):
            TimingPipelineService(timings_config).run(failing_stream())

    @pytest.mark.unit
    def test_oversized_number_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        """A magnitude too large for any duration is an invalid duration, not a worker crash."""
        lines = ["build -> " + "9" * 5000 + "s"] + [f"job{i} -> {i + 1}s" for i in range(5)]
        service = TimingPipelineService(TimingsConfig(worker_count=1))

        with caplog.at_level(logging.WARNING):
            ranked = _run_bounded(service.run, lines)

        assert [r.label for r in ranked] == ["job4", "job3", "job2", "job1", "job0"]
        assert "out of range" in caplog.text

    @pytest.mark.unit
    @pytest.mark.parametrize("worker_count", [1, 3])
    def test_worker_failure_propagates(self, worker_count: int, monkeypatch: pytest.MonkeyPatch) -> None:
        """A crashed worker fails the run instead of hanging it or shortening the result."""

        def parse_or_raise(line: str) -> LineParseResult:
            if line.startswith("boom"):
                raise RuntimeError("parser exploded")
            return parse_line(line)

        monkeypatch.setattr("cmdtimes.workflows.timing.parse_lines_wf.parse_line", parse_or_raise)
        lines = ["boom -> 1s"] + [f"job{i} -> {i}s" for i in range(100)]
        service = TimingPipelineService(TimingsConfig(worker_count=worker_count))

        with pytest.raises(WorkerFailedError, match="parser exploded"):
            _run_bounded(service.run, lines)

"""
Unit tests for cmdtimes.components.timing.report_format_comp module.

Tests label trimming and report layout.
"""

from __future__ import annotations

import pytest

from cmdtimes.components.timing.report_format_comp import (
    FALLBACK_COLUMNS,
    REPORT_HEADER,
    base_command,
    ellipsize,
    format_detail,
    format_report,
    trim_label,
)
from cmdtimes.helpers.dto.timing_dto import Record
from cmdtimes.helpers.duration_helper import MILLISECOND, SECOND, Duration

RANKED = [
    Record("lint", Duration(2 * SECOND)),
    Record("build", Duration(1200 * MILLISECOND)),
    Record("test", Duration(500 * MILLISECOND)),
]


class TestBaseCommand:
    """Tests for base_command function."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("/usr/bin/gcc -c main.c", "gcc -c main.c"),
            ("./tools/run.sh  --fast", "run.sh  --fast"),
            ("/usr/bin/make", "make"),
            ("make", "make"),
            ("cc /src/a.c", "cc /src/a.c"),
            ("", ""),
            (" leading space", " leading space"),
        ],
    )
    def test_strips_directory_of_first_token(self, label: str, expected: str) -> None:
        """Only the first token loses its directory part."""
        assert base_command(label) == expected


class TestEllipsize:
    """Tests for ellipsize function."""

    @pytest.mark.unit
    def test_short_text_unchanged(self) -> None:
        assert ellipsize("abcde", 5) == "abcde"
        assert ellipsize("abc", 200) == "abc"

    @pytest.mark.unit
    def test_long_text_truncated_with_ellipsis(self) -> None:
        """Truncated text is exactly max_columns wide and ends with '...'."""
        result = ellipsize("abcdef", 5)
        assert result == "ab..."
        assert len(result) == 5

    @pytest.mark.unit
    def test_tiny_width_falls_back(self) -> None:
        """Widths too small for the ellipsis use FALLBACK_COLUMNS instead."""
        result = ellipsize("x" * 100, 2)
        assert len(result) == FALLBACK_COLUMNS
        assert result.endswith("...")
        assert ellipsize("short", 0) == "short"


class TestFormatReport:
    """Tests for format_report and format_detail."""

    @pytest.mark.unit
    def test_aligned_rows(self) -> None:
        """Duration cells are padded to a common width before the bar."""
        assert format_report(RANKED, max_columns=200) == [
            REPORT_HEADER,
            "2s     | lint",
            "1.2s   | build",
            "500ms  | test",
        ]

    @pytest.mark.unit
    def test_max_lines_limits_rows(self) -> None:
        lines = format_report(RANKED, max_columns=200, max_lines=2)
        assert lines == [REPORT_HEADER, "2s    | lint", "1.2s  | build"]

    @pytest.mark.unit
    def test_zero_max_lines_prints_all(self) -> None:
        assert len(format_report(RANKED, max_columns=200, max_lines=0)) == 4

    @pytest.mark.unit
    def test_empty_report_is_header_only(self) -> None:
        assert format_report([], max_columns=200) == [REPORT_HEADER]

    @pytest.mark.unit
    def test_labels_are_trimmed(self) -> None:
        """Rows show the trimmed label, never the full one."""
        record = Record("/opt/toolchain/bin/clang++ -O2 -c very/long/path/to/source_file.cpp", Duration(SECOND))
        lines = format_report([record], max_columns=20)

        assert lines[1] == "1s  | " + trim_label(record.label, 20)
        assert lines[1].endswith("clang++ -O2 -c ve...")

    @pytest.mark.unit
    def test_detail_keeps_full_label(self) -> None:
        record = Record("/usr/bin/gcc -c main.c", Duration(1200 * MILLISECOND))
        assert format_detail(record) == ["/usr/bin/gcc -c main.c", "1.2s"]

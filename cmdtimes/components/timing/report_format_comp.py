"""Report formatting for ranked records.

Pure string formatting; printing is left to the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PurePosixPath

from cmdtimes.helpers.dto.timing_dto import Record

REPORT_HEADER = "Longest execution sorted by time:"

ELLIPSIS = "..."

# Used when the configured width is too small to hold the ellipsis
FALLBACK_COLUMNS = 80


def base_command(label: str) -> str:
    """
    Strip the directory part of the label's first space-delimited token.

    Example:
        >>> base_command("/usr/bin/gcc -c main.c")
        'gcc -c main.c'
    """
    head, space, rest = label.partition(" ")
    name = PurePosixPath(head).name if head else head
    # PurePosixPath("/").name is empty; keep the token rather than lose it
    return (name or head) + space + rest


def ellipsize(text: str, max_columns: int) -> str:
    """
    Truncate text to max_columns characters, ending with "..." when cut.

    A max_columns below the ellipsis width falls back to FALLBACK_COLUMNS.
    """
    if max_columns < len(ELLIPSIS):
        max_columns = FALLBACK_COLUMNS
    if len(text) <= max_columns:
        return text
    return text[: max_columns - len(ELLIPSIS)] + ELLIPSIS


def trim_label(label: str, max_columns: int) -> str:
    return ellipsize(base_command(label), max_columns)


def format_report(ranked: Sequence[Record], max_columns: int, max_lines: int = 0) -> list[str]:
    """
    Build the default-mode report lines.

    The first line is REPORT_HEADER; each following line is
    "<duration> | <trimmed label>" with the duration column padded so the
    bars line up.

    Args:
        ranked: Records in ranked order
        max_columns: Width labels are trimmed to
        max_lines: Maximum number of rows (0 = all)

    Returns:
        Report lines without trailing newlines
    """
    rows = ranked[:max_lines] if max_lines > 0 else ranked
    cells = [(f"{record.duration} ", trim_label(record.label, max_columns)) for record in rows]
    if not cells:
        return [REPORT_HEADER]

    width = max(len(duration) for duration, _ in cells) + 1
    return [REPORT_HEADER] + [f"{duration.ljust(width)}| {label}" for duration, label in cells]


def format_detail(record: Record) -> list[str]:
    """Index-mode output: full label, then formatted duration."""
    return [record.label, str(record.duration)]

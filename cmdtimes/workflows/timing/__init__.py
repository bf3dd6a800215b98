"""Timing pipeline workflows."""

from .collect_records_wf import collect_records_workflow
from .feed_lines_wf import feed_lines_workflow, strip_line_terminator
from .parse_lines_wf import parse_lines_workflow

__all__ = [
    "collect_records_workflow",
    "feed_lines_workflow",
    "parse_lines_workflow",
    "strip_line_terminator",
]

"""Timing line components: parsing, ranking and report formatting."""

from .line_parser_comp import PREFILTER_MARKER, SEPARATOR, might_be_measurement, parse_line
from .rank_comp import parse_rank_index, rank_records, select_ranked
from .report_format_comp import REPORT_HEADER, base_command, ellipsize, format_detail, format_report, trim_label

__all__ = [
    "PREFILTER_MARKER",
    "REPORT_HEADER",
    "SEPARATOR",
    "base_command",
    "ellipsize",
    "format_detail",
    "format_report",
    "might_be_measurement",
    "parse_line",
    "parse_rank_index",
    "rank_records",
    "select_ranked",
    "trim_label",
]

"""
Report command: print every ranked record, longest first.
"""

from __future__ import annotations

import argparse

from cmdtimes.components.timing.report_format_comp import format_report
from cmdtimes.helpers.dto.config_dto import TimingsConfig
from cmdtimes.helpers.dto.timing_dto import Record
from cmdtimes.interfaces.cli.cli_ui import print_lines


def cmd_report(args: argparse.Namespace, cfg: TimingsConfig, ranked: list[Record]) -> int:
    """
    Print the header and one "<duration> | <label>" row per record.

    Rows are limited to cfg.max_lines (0 = all) and labels trimmed to
    cfg.max_columns.
    """
    print_lines(format_report(ranked, max_columns=cfg.max_columns, max_lines=cfg.max_lines))
    return 0

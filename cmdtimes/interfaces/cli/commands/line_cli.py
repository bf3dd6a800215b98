"""
Line command: print one ranked record in full.
"""

from __future__ import annotations

import argparse

from cmdtimes.components.timing.rank_comp import select_ranked
from cmdtimes.components.timing.report_format_comp import format_detail
from cmdtimes.helpers.dto.config_dto import TimingsConfig
from cmdtimes.helpers.dto.timing_dto import Record
from cmdtimes.helpers.exceptions import RankIndexError
from cmdtimes.interfaces.cli.cli_ui import print_error, print_lines


def cmd_line(args: argparse.Namespace, cfg: TimingsConfig, ranked: list[Record]) -> int:
    """
    Print the untrimmed label and the duration of the record at args.rank_index.

    Returns 2 if the index is out of range.
    """
    try:
        record = select_ranked(ranked, args.rank_index)
    except RankIndexError as e:
        print_error(str(e))
        return 2

    print_lines(format_detail(record))
    return 0

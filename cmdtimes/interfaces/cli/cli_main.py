#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Iterable
from typing import Any

from cmdtimes.__version__ import __version__
from cmdtimes.components.timing.rank_comp import parse_rank_index
from cmdtimes.helpers.exceptions import ConfigurationError, InputReadError, WorkerFailedError
from cmdtimes.helpers.logging_helper import configure_logging
from cmdtimes.interfaces.cli.cli_ui import print_error
from cmdtimes.interfaces.cli.commands.line_cli import cmd_line
from cmdtimes.interfaces.cli.commands.report_cli import cmd_report
from cmdtimes.services.config_svc import ConfigService
from cmdtimes.services.timing_pipeline_svc import TimingPipelineService

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_WORKER_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="cmdtimes",
        description="Rank '<label> -> <duration>' lines read from stdin, longest first",
        epilog="Examples:\n"
        "  make -d | cmdtimes                         # Top 15 slowest commands\n"
        "  cmdtimes --maxlines 0 < build.log          # Every measured command\n"
        "  cmdtimes --maxcolumns 80 < build.log       # Trim labels to 80 columns\n"
        "  cmdtimes line 0 < build.log                # Full label of the slowest command",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--maxlines", type=int, help="maximum lines to print, 0 for all (default: 15)")
    p.add_argument("--maxcolumns", type=int, help="maximum columns to trim labels to (default: 200)")
    p.add_argument("--workers", type=int, help="parse worker threads (default: CPU count)")
    p.add_argument("--config", help="YAML config file (default: ./config/cmdtimes.yaml, $CMDTIMES_CONFIG)")
    p.add_argument("--log-level", dest="log_level", help="logging level for diagnostics (default: WARNING)")
    p.set_defaults(cmd=None, func=cmd_report)

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Without a command, the ranked report is printed",
    )

    # line: Print one ranked entry in full
    s = sub.add_parser("line", help="Print the full label and duration of one ranked entry")
    s.add_argument("index", help="zero-based rank (0 = longest)")
    s.set_defaults(func=cmd_line)

    return p


def config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Map command-line flags onto config keys (unset flags are None and ignored)."""
    return {
        "workers": args.workers,
        "report": {"max_lines": args.maxlines, "max_columns": args.maxcolumns},
        "logging": {"level": args.log_level},
    }


def stdin_lines() -> Iterable[str]:
    """Standard input, decoding undecodable bytes as replacement characters."""
    stream = sys.stdin
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="replace")
    return stream


def main(argv: list[str] | None = None, stdin: Iterable[str] | None = None) -> int:
    """
    Main entry point for CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        stdin: Input lines (defaults to standard input)

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = ConfigService(config_path=args.config).make_timings_config(config_overrides(args))
        if args.cmd == "line":
            # Reject a malformed index before reading any input
            args.rank_index = parse_rank_index(args.index)
    except ConfigurationError as e:
        print_error(str(e))
        return EXIT_CONFIG_ERROR

    configure_logging(cfg.log_level)

    try:
        ranked = TimingPipelineService(cfg).run(stdin if stdin is not None else stdin_lines())
    except InputReadError as e:
        print_error(str(e))
        return EXIT_INPUT_ERROR
    except WorkerFailedError as e:
        print_error(str(e))
        return EXIT_WORKER_ERROR

    result: int = args.func(args, cfg, ranked)
    return result


if __name__ == "__main__":
    raise SystemExit(main())

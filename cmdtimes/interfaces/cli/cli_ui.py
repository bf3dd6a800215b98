#!/usr/bin/env python3
"""
Rich console output for the CLI.

The report goes to stdout as plain, unwrapped text; status messages go to
stderr so they never mix with the report.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)

# Color scheme constants
COLOR_ERROR = "red"


def print_lines(lines: Iterable[str]) -> None:
    """Print report lines verbatim (no markup, wrapping or highlighting)."""
    for line in lines:
        console.out(line, highlight=False)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(
        f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )

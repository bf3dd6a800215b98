"""CLI command handlers."""

from .line_cli import cmd_line
from .report_cli import cmd_report

__all__ = ["cmd_line", "cmd_report"]

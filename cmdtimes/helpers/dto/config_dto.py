"""
Configuration DTOs.

Rules:
- Import only stdlib and typing (no cmdtimes.* imports)
- Pure data structures only (no I/O, no config loading)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimingsConfig:
    """
    Immutable runtime configuration, built once before the pipeline starts.

    Validation happens in ConfigService.make_timings_config().
    """

    # Number of parse worker threads
    worker_count: int

    # Maximum rows in the default report (0 = no limit)
    max_lines: int = 15

    # Width labels are trimmed to in the default report
    max_columns: int = 200

    # Input lines longer than this many characters are skipped
    max_line_length: int = 65536

    # Logging level name for the CLI
    log_level: str = "WARNING"

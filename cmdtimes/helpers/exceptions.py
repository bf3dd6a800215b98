"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class DurationParseError(ValueError):
    """Raised when a duration token cannot be parsed."""


class InputReadError(Exception):
    """Raised when reading the input stream fails (anything other than end-of-stream)."""


class ConfigurationError(Exception):
    """Raised when a configuration value or command-line argument is invalid."""


class RankIndexError(ConfigurationError):
    """Raised when a rank index is not an integer or falls outside the ranked results."""


class WorkerFailedError(Exception):
    """Raised when a parse worker dies, so the collected records are incomplete."""

"""Measurement line parsing.

Splits `<label> -> <duration>` lines into Records. Only the final separator
demarcates the duration, so labels may themselves contain " -> ".
"""

from __future__ import annotations

import logging

from cmdtimes.helpers.dto.timing_dto import LineParseResult, Record
from cmdtimes.helpers.duration_helper import parse_duration
from cmdtimes.helpers.exceptions import DurationParseError

logger = logging.getLogger(__name__)

SEPARATOR = " -> "

# Cheap pre-filter marker; a substring of SEPARATOR
PREFILTER_MARKER = "->"

_NOT_MEASUREMENT = LineParseResult(status="not_measurement")


def might_be_measurement(line: str) -> bool:
    """
    Fast-path check used before full parsing.

    Never rejects a line parse_line() would accept; may admit lines it rejects.
    """
    return PREFILTER_MARKER in line


def parse_line(line: str) -> LineParseResult:
    """
    Parse one raw line.

    Args:
        line: Input line without its terminator

    Returns:
        LineParseResult with status:
        - "accepted": record holds the label and parsed duration
        - "not_measurement": no separator; silent, nothing logged
        - "invalid_duration": separator found but the trailing token is not a
          duration; a warning is logged and error holds the reason

    Example:
        >>> parse_line("a -> b -> 3s").record
        Record(label='a -> b', duration=Duration(nanoseconds=3000000000))
    """
    label, separator, token = line.rpartition(SEPARATOR)
    if not separator:
        return _NOT_MEASUREMENT

    try:
        duration = parse_duration(token)
    except DurationParseError as e:
        logger.warning("invalid duration %r: %s", token, e)
        return LineParseResult(status="invalid_duration", error=str(e))

    return LineParseResult(status="accepted", record=Record(label=label, duration=duration))

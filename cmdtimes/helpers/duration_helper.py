"""
Duration value type, parser and formatter.

Durations are stored as a signed integer count of nanoseconds so that every
token accepted by parse_duration() round-trips exactly and ordering is total.

Accepted token grammar (compound, optionally signed):
    [+-]? ( <number> <unit> )+      e.g. "1.5s", "250ms", "1h2m3.5s", "-3s"
    [+-]? 0                          bare zero needs no unit

<number> is digits with an optional fraction ("1", "1.", ".5", "1.25").
<unit> is one of ns, us, µs, μs, ms, s, m, h.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from cmdtimes.helpers.exceptions import DurationParseError

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# Signed 64-bit nanosecond range
MAX_NANOSECONDS = (1 << 63) - 1
MIN_NANOSECONDS = -(1 << 63)

# Any integer part with more significant digits overflows the range for every unit
MAX_WHOLE_DIGITS = len(str(MAX_NANOSECONDS))

# Fraction digits beyond this are ignored; they sit far below nanosecond precision
MAX_FRACTION_DIGITS = 32

_COMPONENT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


@dataclass(frozen=True, order=True)
class Duration:
    """
    Signed time interval with nanosecond precision.

    Instances compare by their nanosecond value and render in compound form
    via str(): 2s, 1.2s, 500ms, 1m30s, 1h0m0s.
    """

    nanoseconds: int

    def __str__(self) -> str:
        return format_duration(self)


def parse_duration(token: str) -> Duration:
    """
    Parse a compound duration token.

    Args:
        token: Duration text such as "1.2s", "500ms" or "1h15m"

    Returns:
        Parsed Duration (fractions truncated to whole nanoseconds)

    Raises:
        DurationParseError: Empty token, missing or unknown unit, non-numeric
            magnitude, or a value outside the signed 64-bit nanosecond range

    Example:
        >>> parse_duration("1m30s")
        Duration(nanoseconds=90000000000)
    """
    s = token
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return Duration(0)
    if not s:
        raise DurationParseError(f"invalid duration {token!r}")

    total = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT_RE.match(s, pos)
        if match is None:
            raise DurationParseError(f"invalid duration {token!r}")
        whole, fraction, unit_name = match.group(1), match.group(2), match.group(3)

        if not whole and not fraction:
            raise DurationParseError(f"invalid duration {token!r}")
        if not unit_name:
            raise DurationParseError(f"missing unit in duration {token!r}")

        unit = UNITS.get(unit_name)
        if unit is None:
            raise DurationParseError(f"unknown unit {unit_name!r} in duration {token!r}")

        whole = whole.lstrip("0")
        if len(whole) > MAX_WHOLE_DIGITS:
            raise DurationParseError(f"invalid duration {token!r}: out of range")
        value = int(whole or "0") * unit
        if fraction:
            fraction = fraction[:MAX_FRACTION_DIGITS]
            value += int(fraction) * unit // 10 ** len(fraction)
        total += value
        pos = match.end()

    if negative:
        total = -total
    if total > MAX_NANOSECONDS or total < MIN_NANOSECONDS:
        raise DurationParseError(f"invalid duration {token!r}: out of range")

    return Duration(total)


def _format_fraction(value: int, unit: int) -> str:
    """Render value/unit as a decimal with trailing zeros dropped."""
    whole, remainder = divmod(value, unit)
    if not remainder:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{remainder:0{digits}d}".rstrip("0")


def format_duration(duration: Duration) -> str:
    """
    Render a Duration in compound form.

    Sub-second values use the largest fitting unit (ns, µs, ms); values of one
    second or more use h/m/s components with the leading zero components
    omitted.

    Example:
        >>> format_duration(Duration(90 * SECOND))
        '1m30s'
    """
    ns = duration.nanoseconds
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    magnitude = abs(ns)

    if magnitude < MICROSECOND:
        return f"{sign}{magnitude}ns"
    if magnitude < MILLISECOND:
        return f"{sign}{_format_fraction(magnitude, MICROSECOND)}µs"
    if magnitude < SECOND:
        return f"{sign}{_format_fraction(magnitude, MILLISECOND)}ms"

    hours, remainder = divmod(magnitude, HOUR)
    minutes, remainder = divmod(remainder, MINUTE)
    seconds = _format_fraction(remainder, SECOND)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"

"""Canonical W3C date-time formatting.

Output form: YYYY-MM-DDThh:mm:ss[.fraction]TZD

- The fraction is written only when the nanosecond is nonzero, using the
  shortest of millisecond, microsecond or nanosecond precision that
  represents it exactly (.001, .000031, .000000004).
- A zero offset is written as "Z", any other as ±hh:mm.

Thread-safe. Pure functions.

Python 3.13+. Zero external dependencies.
"""

from datetime import datetime

from w3cdatetime.constants import (
    NANOSECONDS_PER_MICROSECOND,
    NEGATIVE_SIGN,
    POSITIVE_SIGN,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UTC_DESIGNATOR,
)
from w3cdatetime.timestamp import W3CDateTime

__all__ = ["format_w3c"]

_NANOSECONDS_PER_MILLISECOND: int = 1_000_000


def format_w3c(value: W3CDateTime | datetime) -> str:
    """Return the canonical W3C string, e.g. ``1996-12-19T16:39:57Z``.

    Args:
        value: Parsed timestamp, or an aware datetime with a whole-minute
            offset (converted via W3CDateTime.from_datetime)

    Returns:
        Canonical W3C date-time text

    Raises:
        ValueError: If a datetime argument is naive or has a sub-minute offset

    Examples:
        >>> format_w3c(parse_w3c_datetime("2015-03-04")[0])
        '2015-03-04T00:00:00Z'
        >>> from datetime import datetime, timedelta, timezone
        >>> format_w3c(datetime(2001, 9, 11, 9, 45, tzinfo=timezone(timedelta(hours=-8))))
        '2001-09-11T09:45:00-08:00'
    """
    if isinstance(value, datetime):
        value = W3CDateTime.from_datetime(value)

    local = value.to_datetime()
    text = (
        f"{local.year:04d}-{local.month:02d}-{local.day:02d}"
        f"T{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
    )
    if value.nanosecond:
        text += _format_fraction(value.nanosecond)
    return text + _format_offset(value.offset_seconds)


def _format_fraction(nanosecond: int) -> str:
    if nanosecond % _NANOSECONDS_PER_MILLISECOND == 0:
        return f".{nanosecond // _NANOSECONDS_PER_MILLISECOND:03d}"
    if nanosecond % NANOSECONDS_PER_MICROSECOND == 0:
        return f".{nanosecond // NANOSECONDS_PER_MICROSECOND:06d}"
    return f".{nanosecond:09d}"


def _format_offset(offset_seconds: int) -> str:
    if offset_seconds == 0:
        return UTC_DESIGNATOR
    sign = POSITIVE_SIGN if offset_seconds > 0 else NEGATIVE_SIGN
    magnitude = abs(offset_seconds)
    hour = magnitude // SECONDS_PER_HOUR
    minute = (magnitude % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE
    return f"{sign}{hour:02d}:{minute:02d}"

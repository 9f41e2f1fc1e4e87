"""W3C date-time grammar driver.

Grammar (https://www.w3.org/TR/NOTE-datetime), restricted to the forms with
a complete date:

    YYYY-MM-DD
    YYYY-MM-DDThh:mmTZD
    YYYY-MM-DDThh:mm:ssTZD
    YYYY-MM-DDThh:mm:ss.sTZD

    TZD = "Z" | ("+" | "-") hh ":" mm

The grammar is linear with a single branch point (the "T" after the date),
so one forward pass over the input decides everything. The first field that
fails terminates the parse; the resulting error is returned, not raised.

Thread-safe. No global state.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from w3cdatetime.constants import (
    DATE_SEPARATOR,
    DAY_RANGE,
    DECIMAL_POINT,
    FIELD_WIDTH,
    HOUR_RANGE,
    MINUTE_RANGE,
    MONTH_RANGE,
    NANOSECONDS_PER_MICROSECOND,
    SECOND_RANGE,
    TIME_MARKER,
    TIME_SEPARATOR,
    YEAR_WIDTH,
)
from w3cdatetime.diagnostics import (
    ErrorTemplate,
    ParseErrorKind,
    SourceSpan,
    W3CParseError,
)
from w3cdatetime.syntax.cursor import Cursor
from w3cdatetime.syntax.scanner import (
    scan_bounded_integer,
    scan_end_of_input,
    scan_fixed_width_integer,
    scan_fractional_seconds,
    scan_literal,
    scan_literal_or_end,
    scan_optional_literal,
    scan_zone_designator,
)
from w3cdatetime.timestamp import W3CDateTime

__all__ = ["parse_w3c_datetime"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _ParsedFields:
    """Lexically valid fields, not yet checked against the calendar."""

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    offset_seconds: int = 0


def parse_w3c_datetime(
    value: str,
) -> tuple[W3CDateTime | None, tuple[W3CParseError, ...]]:
    """Parse a W3C date-time string.

    Never raises for bad input. Errors are returned in the tuple, which holds
    at most one error: parsing stops at the first failing token.

    A bare date resolves to midnight UTC. With a time part the zone
    designator is mandatory.

    Args:
        value: Input text, e.g. "1997-07-16T19:20:30.45+01:00"

    Returns:
        Tuple of (result, errors):
        - result: Resolved W3CDateTime, or None if parsing failed
        - errors: Empty tuple on success, else one W3CParseError

    Examples:
        >>> result, errors = parse_w3c_datetime("2015-03-04")
        >>> str(result), errors
        ('2015-03-04T00:00:00Z', ())

        >>> result, errors = parse_w3c_datetime("2015-03-04Z")
        >>> result is None
        True
        >>> errors[0].kind, errors[0].begin, errors[0].end
        (<ParseErrorKind.INVALID_TOKEN: 1102>, 10, 11)

    Thread Safety:
        Thread-safe. Uses only local state.
    """
    # Type check: value must be string (runtime defense for untyped callers)
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.input_not_string(type(value).__name__)  # type: ignore[unreachable]
        return (None, (W3CParseError(diagnostic, input_value=str(value)),))

    try:
        fields = _scan_fields(Cursor(value, 0))
        return (_resolve(fields, value), ())
    except W3CParseError as error:
        logger.debug(
            "W3C parse failed: %s at %d..%d in %r",
            error.kind.name,
            error.begin,
            error.end,
            value,
        )
        return (None, (error,))


def _scan_fields(cursor: Cursor) -> _ParsedFields:
    """Run the scanners in grammar order and collect the field values."""
    fields = _ParsedFields()

    # Date (mandatory)
    year = scan_fixed_width_integer(cursor, YEAR_WIDTH, ParseErrorKind.INVALID_YEAR, signed=True)
    cursor = scan_literal(year.cursor, DATE_SEPARATOR).cursor
    month = scan_bounded_integer(cursor, FIELD_WIDTH, MONTH_RANGE, ParseErrorKind.INVALID_MONTH)
    cursor = scan_literal(month.cursor, DATE_SEPARATOR).cursor
    day = scan_bounded_integer(cursor, FIELD_WIDTH, DAY_RANGE, ParseErrorKind.INVALID_DAY)
    cursor = day.cursor
    fields.year, fields.month, fields.day = year.value, month.value, day.value

    # Branch point: end of input here means date only
    marker = scan_literal_or_end(cursor, TIME_MARKER)
    cursor = marker.cursor
    if marker.value:
        hour = scan_bounded_integer(cursor, FIELD_WIDTH, HOUR_RANGE, ParseErrorKind.INVALID_HOUR)
        cursor = scan_literal(hour.cursor, TIME_SEPARATOR).cursor
        minute = scan_bounded_integer(
            cursor, FIELD_WIDTH, MINUTE_RANGE, ParseErrorKind.INVALID_MINUTE
        )
        cursor = minute.cursor
        fields.hour, fields.minute = hour.value, minute.value

        has_seconds = scan_optional_literal(cursor, TIME_SEPARATOR)
        cursor = has_seconds.cursor
        if has_seconds.value:
            second = scan_bounded_integer(
                cursor, FIELD_WIDTH, SECOND_RANGE, ParseErrorKind.INVALID_SECONDS
            )
            cursor = second.cursor
            fields.second = second.value

            has_fraction = scan_optional_literal(cursor, DECIMAL_POINT)
            cursor = has_fraction.cursor
            if has_fraction.value:
                fraction = scan_fractional_seconds(cursor)
                cursor = fraction.cursor
                fields.nanosecond = fraction.value

        offset = scan_zone_designator(cursor)
        cursor = offset.cursor
        fields.offset_seconds = offset.value

    scan_end_of_input(cursor)
    return fields


def _resolve(fields: _ParsedFields, value: str) -> W3CDateTime:
    """Check fields against the calendar and convert to a UTC instant.

    The calendar reports no position, so any failure here spans the whole
    input as INVALID_FORMAT.
    """
    try:
        local = datetime.combine(
            date(fields.year, fields.month, fields.day),
            time(
                fields.hour,
                fields.minute,
                fields.second,
                fields.nanosecond // NANOSECONDS_PER_MICROSECOND,
            ),
        )
        utc = local - timedelta(seconds=fields.offset_seconds)
    except (ValueError, OverflowError) as e:
        diagnostic = ErrorTemplate.invalid_format(SourceSpan(0, len(value)), str(e))
        raise W3CParseError(diagnostic, input_value=value) from e

    return W3CDateTime(
        utc=utc.replace(tzinfo=UTC),
        nanosecond=fields.nanosecond,
        offset_seconds=fields.offset_seconds,
    )

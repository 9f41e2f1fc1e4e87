"""Field scanners for the W3C date-time grammar.

Each scanner consumes one lexical unit at the cursor and returns a
ParseResult holding the value and the advanced cursor. On failure it raises
W3CParseError; because Cursor is immutable the caller's position is left
exactly where the failed token began, so every error span is measured from
the start of the attempted token.

Scanners never backtrack and never look past the token they own.

Python 3.13+. Zero external dependencies.
"""

from typing import NoReturn

from w3cdatetime.constants import (
    ASCII_DIGITS,
    FIELD_WIDTH,
    MAX_FRACTION_DIGITS,
    MINUTE_RANGE,
    NEGATIVE_SIGN,
    POSITIVE_SIGN,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TIME_SEPARATOR,
    UTC_DESIGNATOR,
    ZONE_HOUR_RANGE,
)
from w3cdatetime.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    ParseErrorKind,
    SourceSpan,
    W3CParseError,
)
from w3cdatetime.syntax.cursor import Cursor, ParseResult

__all__ = [
    "scan_bounded_integer",
    "scan_end_of_input",
    "scan_fixed_width_integer",
    "scan_fractional_seconds",
    "scan_literal",
    "scan_literal_or_end",
    "scan_optional_literal",
    "scan_zone_designator",
]

_SIGNS: tuple[str, str] = (POSITIVE_SIGN, NEGATIVE_SIGN)
_ZONE_EXPECTED: tuple[str, ...] = (UTC_DESIGNATOR, POSITIVE_SIGN, NEGATIVE_SIGN)


def _fail(diagnostic: Diagnostic, cursor: Cursor) -> NoReturn:
    raise W3CParseError(diagnostic, input_value=cursor.source)


def _is_integer_lexeme(text: str, *, signed: bool) -> bool:
    """Check text is ASCII digits, optionally preceded by one sign character.

    int() alone is too lenient here: it accepts surrounding whitespace,
    underscores between digits and non-ASCII decimal digits.
    """
    if signed and text[:1] in _SIGNS:
        text = text[1:]
    return bool(text) and all(c in ASCII_DIGITS for c in text)


def scan_fixed_width_integer(
    cursor: Cursor,
    width: int,
    kind: ParseErrorKind,
    *,
    signed: bool = False,
) -> ParseResult[int]:
    """Scan exactly ``width`` characters as an integer.

    Args:
        cursor: Current position in source
        width: Number of characters the field occupies
        kind: Error kind reported on failure
        signed: Accept a leading '+' or '-' inside the width

    Returns:
        ParseResult(value, cursor advanced by width)

    Raises:
        W3CParseError: ``kind`` over [pos, pos + width) if fewer than width
            characters remain or they do not form an integer

    Example:
        >>> scan_fixed_width_integer(Cursor("2015-", 0), 4, ParseErrorKind.INVALID_YEAR).value
        2015
        >>> scan_fixed_width_integer(
        ...     Cursor("-044", 0), 4, ParseErrorKind.INVALID_YEAR, signed=True
        ... ).value
        -44
    """
    span = SourceSpan.at(cursor.pos, width)
    if cursor.remaining < width:
        _fail(ErrorTemplate.field_unparsable(kind, span), cursor)

    text = cursor.slice_ahead(width)
    if not _is_integer_lexeme(text, signed=signed):
        _fail(ErrorTemplate.field_unparsable(kind, span), cursor)

    return ParseResult(int(text), cursor.advance(width))


def scan_bounded_integer(
    cursor: Cursor,
    width: int,
    bounds: tuple[int, int],
    kind: ParseErrorKind,
) -> ParseResult[int]:
    """Scan an unsigned fixed-width integer and check it against bounds.

    Lexical failures report ``kind``; values outside the inclusive bounds
    report INVALID_LOW_VALUE or INVALID_HIGH_VALUE over the same span.
    """
    result = scan_fixed_width_integer(cursor, width, kind)
    minimum, maximum = bounds
    if not minimum <= result.value <= maximum:
        span = SourceSpan.at(cursor.pos, width)
        _fail(
            ErrorTemplate.value_out_of_range(kind, span, result.value, minimum, maximum),
            cursor,
        )
    return result


def scan_fractional_seconds(cursor: Cursor) -> ParseResult[int]:
    """Scan the digit run after a decimal point as nanoseconds.

    A run of n digits with value v denotes v * 10**(9 - n) nanoseconds:
    ".5" is half a second, ".000000004" is 4 ns.

    Raises:
        W3CParseError: INVALID_NANOSECONDS spanning exactly the digit run
            when it is empty or longer than nine digits
    """
    run = cursor.take_while(ASCII_DIGITS)
    if not 1 <= len(run) <= MAX_FRACTION_DIGITS:
        span = SourceSpan.at(cursor.pos, len(run))
        _fail(ErrorTemplate.fraction_invalid(span, MAX_FRACTION_DIGITS), cursor)

    nanosecond = int(run) * 10 ** (MAX_FRACTION_DIGITS - len(run))
    return ParseResult(nanosecond, cursor.advance(len(run)))


def scan_literal(cursor: Cursor, token: str) -> ParseResult[str]:
    """Require token at the cursor.

    Raises:
        W3CParseError: INVALID_TOKEN over [pos, pos + len(token)) on
            mismatch or insufficient input
    """
    if not cursor.starts_with(token):
        span = SourceSpan.at(cursor.pos, len(token))
        _fail(ErrorTemplate.unexpected_token(span, (token,)), cursor)
    return ParseResult(token, cursor.advance(len(token)))


def scan_literal_or_end(cursor: Cursor, token: str) -> ParseResult[bool]:
    """Accept token, or end of input in its place.

    Returns:
        ParseResult(True, advanced) if token is present, ParseResult(False,
        cursor) if too little input remains to hold it

    Raises:
        W3CParseError: INVALID_TOKEN if input remains but is not token
    """
    if cursor.remaining < len(token):
        return ParseResult(False, cursor)
    return ParseResult(True, scan_literal(cursor, token).cursor)


def scan_optional_literal(cursor: Cursor, token: str) -> ParseResult[bool]:
    """Probe for token without requiring it.

    Returns:
        ParseResult(True, advanced) if present, ParseResult(False, cursor)
        if other input is there instead

    Raises:
        W3CParseError: INVALID_TOKEN if too little input remains to decide,
            since whatever follows the probe is mandatory
    """
    if cursor.remaining < len(token):
        span = SourceSpan.at(cursor.pos, len(token))
        _fail(ErrorTemplate.unexpected_token(span, (token,)), cursor)
    if cursor.starts_with(token):
        return ParseResult(True, cursor.advance(len(token)))
    return ParseResult(False, cursor)


def scan_zone_designator(cursor: Cursor) -> ParseResult[int]:
    """Scan TZD: 'Z' or a signed hh:mm offset.

    Returns:
        ParseResult(offset in seconds east of UTC, advanced cursor)

    Raises:
        W3CParseError: INVALID_TOKEN (width 1) if neither 'Z' nor a sign is
            at the cursor; hour/minute errors from the offset fields
    """
    lead = cursor.peek()
    if lead == UTC_DESIGNATOR:
        return ParseResult(0, cursor.advance())
    if lead not in _SIGNS:
        _fail(ErrorTemplate.unexpected_token(SourceSpan.at(cursor.pos, 1), _ZONE_EXPECTED), cursor)

    sign = -1 if lead == NEGATIVE_SIGN else 1
    hour = scan_bounded_integer(
        cursor.advance(), FIELD_WIDTH, ZONE_HOUR_RANGE, ParseErrorKind.INVALID_HOUR
    )
    separator = scan_literal(hour.cursor, TIME_SEPARATOR)
    minute = scan_bounded_integer(
        separator.cursor, FIELD_WIDTH, MINUTE_RANGE, ParseErrorKind.INVALID_MINUTE
    )
    offset = sign * (hour.value * SECONDS_PER_HOUR + minute.value * SECONDS_PER_MINUTE)
    return ParseResult(offset, minute.cursor)


def scan_end_of_input(cursor: Cursor) -> ParseResult[None]:
    """Require end of input.

    Raises:
        W3CParseError: STRING_NOT_ENDED with the empty span [pos, pos)
    """
    if not cursor.is_eof:
        _fail(ErrorTemplate.string_not_ended(cursor.pos), cursor)
    return ParseResult(None, cursor)

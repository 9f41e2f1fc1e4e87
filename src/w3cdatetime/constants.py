"""Shared constants for w3cdatetime.

This module provides the lexical layout of the W3C date-time profile in one
place. Scanner, driver, and formatter all read from here so field widths and
bounds cannot drift between call sites.

Constants are grouped by domain:
- Field widths: Fixed character counts per numeric field
- Field bounds: Lexical range limits per numeric field
- Literals: Separators and zone designator tokens
- Diagnostics: Output limits for error rendering

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Field widths
    "YEAR_WIDTH",
    "FIELD_WIDTH",
    "MAX_FRACTION_DIGITS",
    # Field bounds
    "MONTH_RANGE",
    "DAY_RANGE",
    "HOUR_RANGE",
    "ZONE_HOUR_RANGE",
    "MINUTE_RANGE",
    "SECOND_RANGE",
    # Literals
    "DATE_SEPARATOR",
    "TIME_MARKER",
    "TIME_SEPARATOR",
    "DECIMAL_POINT",
    "UTC_DESIGNATOR",
    "POSITIVE_SIGN",
    "NEGATIVE_SIGN",
    "ASCII_DIGITS",
    # Time units
    "NANOSECONDS_PER_SECOND",
    "NANOSECONDS_PER_MICROSECOND",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    # Diagnostics
    "MAX_DIAGNOSTIC_CONTENT_LENGTH",
]

# ============================================================================
# FIELD WIDTHS
# ============================================================================

# YYYY: four characters, sign included when present ("-123" is a valid lexeme).
YEAR_WIDTH: int = 4

# MM, DD, hh, mm, ss and the zone offset hh/mm are all two characters wide.
FIELD_WIDTH: int = 2

# Fraction of a second is resolved to nanoseconds; a tenth digit has no slot.
MAX_FRACTION_DIGITS: int = 9

# ============================================================================
# FIELD BOUNDS
# ============================================================================
#
# Bounds are inclusive (minimum, maximum) pairs. DAY_RANGE is lexical only:
# whether day 31 exists in a given month is decided at calendar resolution.

MONTH_RANGE: tuple[int, int] = (1, 12)
DAY_RANGE: tuple[int, int] = (1, 31)
HOUR_RANGE: tuple[int, int] = (0, 23)
ZONE_HOUR_RANGE: tuple[int, int] = (0, 12)
MINUTE_RANGE: tuple[int, int] = (0, 59)
SECOND_RANGE: tuple[int, int] = (0, 59)

# ============================================================================
# LITERALS
# ============================================================================

DATE_SEPARATOR: str = "-"
TIME_MARKER: str = "T"
TIME_SEPARATOR: str = ":"
DECIMAL_POINT: str = "."
UTC_DESIGNATOR: str = "Z"
POSITIVE_SIGN: str = "+"
NEGATIVE_SIGN: str = "-"

# ASCII digits only. str.isdigit() accepts Unicode digits such as "²" and
# int() accepts Arabic-Indic digits, neither of which belong in W3C input.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# ============================================================================
# TIME UNITS
# ============================================================================

NANOSECONDS_PER_SECOND: int = 1_000_000_000
NANOSECONDS_PER_MICROSECOND: int = 1_000
SECONDS_PER_HOUR: int = 3600
SECONDS_PER_MINUTE: int = 60

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Maximum echoed input length when a DiagnosticFormatter sanitizes output.
# Valid W3C strings are at most 35 characters; 100 leaves room for context.
MAX_DIAGNOSTIC_CONTENT_LENGTH: int = 100

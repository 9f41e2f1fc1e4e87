"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ParseErrorKind, SourceSpan

__all__ = ["ErrorTemplate"]

# One fixed message per kind. Context (value, bounds, expected token) goes
# into the hint so that messages stay comparable across inputs.
_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.INVALID_YEAR: "Unable to parse year.",
    ParseErrorKind.INVALID_MONTH: "Unable to parse month.",
    ParseErrorKind.INVALID_DAY: "Unable to parse day.",
    ParseErrorKind.INVALID_HOUR: "Unable to parse hour.",
    ParseErrorKind.INVALID_MINUTE: "Unable to parse minutes.",
    ParseErrorKind.INVALID_SECONDS: "Unable to parse seconds.",
    ParseErrorKind.INVALID_NANOSECONDS: "Unable to parse nanoseconds.",
    ParseErrorKind.INVALID_FORMAT: "Invalid format.",
    ParseErrorKind.INVALID_TOKEN: "Unexpected token.",
    ParseErrorKind.INVALID_LOW_VALUE: "Invalid value range. Value is too low.",
    ParseErrorKind.INVALID_HIGH_VALUE: "Invalid value range. Value is too high.",
    ParseErrorKind.INVALID_DATE: "Date is not exists.",
    ParseErrorKind.INVALID_TIME: "Time is not exists.",
    ParseErrorKind.STRING_NOT_ENDED: "Date is parsed, but there is some text after date.",
}

# Field kinds double as field identifiers for range hints.
_FIELD_NAMES: dict[ParseErrorKind, str] = {
    ParseErrorKind.INVALID_YEAR: "Year",
    ParseErrorKind.INVALID_MONTH: "Month",
    ParseErrorKind.INVALID_DAY: "Day",
    ParseErrorKind.INVALID_HOUR: "Hour",
    ParseErrorKind.INVALID_MINUTE: "Minute",
    ParseErrorKind.INVALID_SECONDS: "Second",
}


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - One message per ParseErrorKind
        - Documentation of all error cases
    """

    @staticmethod
    def message_for(kind: ParseErrorKind) -> str:
        """Fixed human-readable message for an error kind."""
        return _MESSAGES[kind]

    @staticmethod
    def field_unparsable(kind: ParseErrorKind, span: SourceSpan) -> Diagnostic:
        """Fixed-width numeric field is missing or not a number.

        Args:
            kind: Field error kind (INVALID_YEAR .. INVALID_SECONDS)
            span: Characters the field was expected to occupy

        Returns:
            Diagnostic for the given field kind
        """
        field = _FIELD_NAMES.get(kind, "Field")
        if kind is ParseErrorKind.INVALID_YEAR:
            hint = f"{field} must be {span.length} characters: digits with an optional sign"
        else:
            hint = f"{field} must be exactly {span.length} ASCII digits"
        return Diagnostic(
            code=kind,
            message=_MESSAGES[kind],
            span=span,
            hint=hint,
        )

    @staticmethod
    def value_out_of_range(
        field_kind: ParseErrorKind,
        span: SourceSpan,
        value: int,
        minimum: int,
        maximum: int,
    ) -> Diagnostic:
        """Numeric field scanned but lies outside its inclusive bounds.

        Args:
            field_kind: Kind identifying the field (used for the hint only)
            span: Characters holding the value
            value: The scanned value
            minimum: Lowest accepted value
            maximum: Highest accepted value

        Returns:
            Diagnostic for INVALID_LOW_VALUE or INVALID_HIGH_VALUE
        """
        kind = (
            ParseErrorKind.INVALID_LOW_VALUE
            if value < minimum
            else ParseErrorKind.INVALID_HIGH_VALUE
        )
        field = _FIELD_NAMES.get(field_kind, "Value")
        width = span.length
        return Diagnostic(
            code=kind,
            message=_MESSAGES[kind],
            span=span,
            hint=(
                f"{field} must be between {minimum:0{width}d} and {maximum:0{width}d}, "
                f"got {value:0{width}d}"
            ),
        )

    @staticmethod
    def fraction_invalid(span: SourceSpan, max_digits: int) -> Diagnostic:
        """Fraction of a second has no digits or too many digits.

        Args:
            span: The digit run after the decimal point (empty when no digits)
            max_digits: Maximum accepted number of digits

        Returns:
            Diagnostic for INVALID_NANOSECONDS
        """
        if span.length == 0:
            hint = "Add at least one digit after the decimal point"
        else:
            hint = (
                f"Fraction of a second takes 1 to {max_digits} digits, "
                f"got {span.length}"
            )
        return Diagnostic(
            code=ParseErrorKind.INVALID_NANOSECONDS,
            message=_MESSAGES[ParseErrorKind.INVALID_NANOSECONDS],
            span=span,
            hint=hint,
        )

    @staticmethod
    def unexpected_token(span: SourceSpan, expected: tuple[str, ...]) -> Diagnostic:
        """Literal separator or zone designator not found.

        Args:
            span: Characters where the token was expected
            expected: Accepted literal tokens

        Returns:
            Diagnostic for INVALID_TOKEN
        """
        expected_str = ", ".join(f"'{e}'" for e in expected)
        return Diagnostic(
            code=ParseErrorKind.INVALID_TOKEN,
            message=_MESSAGES[ParseErrorKind.INVALID_TOKEN],
            span=span,
            hint=f"Expected {expected_str}",
        )

    @staticmethod
    def string_not_ended(position: int) -> Diagnostic:
        """Complete date-time parsed but input continues.

        Args:
            position: Offset of the first unconsumed character

        Returns:
            Diagnostic for STRING_NOT_ENDED with an empty span
        """
        return Diagnostic(
            code=ParseErrorKind.STRING_NOT_ENDED,
            message=_MESSAGES[ParseErrorKind.STRING_NOT_ENDED],
            span=SourceSpan(position, position),
            hint="Remove the text after the date-time",
        )

    @staticmethod
    def invalid_format(span: SourceSpan, reason: str) -> Diagnostic:
        """Input is lexically valid but does not resolve to a timestamp.

        Args:
            span: Whole input
            reason: Why resolution failed

        Returns:
            Diagnostic for INVALID_FORMAT
        """
        return Diagnostic(
            code=ParseErrorKind.INVALID_FORMAT,
            message=_MESSAGES[ParseErrorKind.INVALID_FORMAT],
            span=span,
            hint=reason,
        )

    @staticmethod
    def input_not_string(type_name: str) -> Diagnostic:
        """Parse called with something other than str.

        Args:
            type_name: Name of the received type

        Returns:
            Diagnostic for INVALID_FORMAT with an empty span
        """
        return Diagnostic(
            code=ParseErrorKind.INVALID_FORMAT,
            message=_MESSAGES[ParseErrorKind.INVALID_FORMAT],
            span=SourceSpan(0, 0),
            hint=f"Expected string, got {type_name}",
        )

    @staticmethod
    def invalid_date(span: SourceSpan) -> Diagnostic:
        """Date components do not name a calendar day (reserved kind)."""
        return Diagnostic(
            code=ParseErrorKind.INVALID_DATE,
            message=_MESSAGES[ParseErrorKind.INVALID_DATE],
            span=span,
        )

    @staticmethod
    def invalid_time(span: SourceSpan) -> Diagnostic:
        """Time components do not name a time of day (reserved kind)."""
        return Diagnostic(
            code=ParseErrorKind.INVALID_TIME,
            message=_MESSAGES[ParseErrorKind.INVALID_TIME],
            span=span,
        )

"""w3cdatetime exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ParseErrorKind, SourceSpan
from .formatter import DiagnosticFormatter, OutputFormat

__all__ = ["W3CError", "W3CParseError"]


class W3CError(Exception):
    """Base exception for all w3cdatetime errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize W3CError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class W3CParseError(W3CError):
    """A W3C date-time string failed to parse.

    Returned (not raised) by parse_w3c_datetime(), consistent with the
    never-raise parse API. It is still an Exception, so callers that prefer
    exceptions can simply ``raise`` it.

    Attributes:
        diagnostic: Diagnostic carrying kind, span, message and hint
        input_value: The string that failed to parse

    Example:
        >>> result, errors = parse_w3c_datetime("2015-01-20T25:35:20-08:00")
        >>> error = errors[0]
        >>> error.kind, error.begin, error.end
        (<ParseErrorKind.INVALID_HIGH_VALUE: 1202>, 11, 13)
    """

    diagnostic: Diagnostic

    def __init__(self, diagnostic: Diagnostic, *, input_value: str = "") -> None:
        """Initialize W3CParseError.

        Args:
            diagnostic: Diagnostic with a span (required for parse errors)
            input_value: The string that failed to parse
        """
        if diagnostic.span is None:
            msg = f"Parse diagnostic {diagnostic.code.name} requires a span"
            raise ValueError(msg)
        super().__init__(diagnostic)
        self.input_value = input_value

    @property
    def kind(self) -> ParseErrorKind:
        """Kind of parse failure."""
        return self.diagnostic.code

    @property
    def span(self) -> SourceSpan:
        """Offending character range [begin, end)."""
        # Guaranteed by __init__
        return self.diagnostic.span  # type: ignore[return-value]

    @property
    def begin(self) -> int:
        """Start of the offending range (inclusive)."""
        return self.span.start

    @property
    def end(self) -> int:
        """End of the offending range (exclusive)."""
        return self.span.end

    def format_with_context(self, output_format: OutputFormat = OutputFormat.RUST) -> str:
        """Render the diagnostic with the input echoed under the span.

        Args:
            output_format: Output style (default: rust)

        Returns:
            Formatted diagnostic string
        """
        formatter = DiagnosticFormatter(output_format=output_format)
        return formatter.format(self.diagnostic, self.input_value)

    def __repr__(self) -> str:
        return (
            f"W3CParseError(kind={self.kind.name}, begin={self.begin}, "
            f"end={self.end}, input_value={self.input_value!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, W3CParseError):
            return NotImplemented
        return (
            self.diagnostic == other.diagnostic
            and self.input_value == other.input_value
        )

    def __hash__(self) -> int:
        return hash((self.diagnostic, self.input_value))

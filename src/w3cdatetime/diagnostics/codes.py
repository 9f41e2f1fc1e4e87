"""Diagnostic codes and data structures.

Defines error kinds, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "ParseErrorKind",
    "SourceSpan",
]


class ParseErrorKind(Enum):
    """Closed set of W3C date-time parse failures.

    Organized by category:
        1000-1099: Field errors (a fixed-width field failed to scan)
        1100-1199: Structural errors (punctuation, grammar, trailing input)
        1200-1299: Range errors (field scanned but outside its bounds)
        1300-1399: Calendar errors (reserved, see below)

    INVALID_DATE and INVALID_TIME are reserved for calendar-level rejection.
    The parser does not emit them: the calendar collaborator reports no
    sub-span, so such failures surface as INVALID_FORMAT over the whole input.
    """

    # Field errors (1000-1099)
    INVALID_YEAR = 1001
    INVALID_MONTH = 1002
    INVALID_DAY = 1003
    INVALID_HOUR = 1004
    INVALID_MINUTE = 1005
    INVALID_SECONDS = 1006
    INVALID_NANOSECONDS = 1007

    # Structural errors (1100-1199)
    INVALID_FORMAT = 1101
    INVALID_TOKEN = 1102
    STRING_NOT_ENDED = 1103

    # Range errors (1200-1299)
    INVALID_LOW_VALUE = 1201
    INVALID_HIGH_VALUE = 1202

    # Calendar errors (1300-1399)
    INVALID_DATE = 1301
    INVALID_TIME = 1302


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open character range [start, end) in the parsed input.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. Every offset in this package is a code point offset, so a
        span over input containing multi-byte characters still indexes the
        original ``str`` directly.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @classmethod
    def at(cls, position: int, length: int) -> "SourceSpan":
        """Build a span of ``length`` characters starting at ``position``."""
        return cls(position, position + length)

    @property
    def length(self) -> int:
        """Number of characters covered (0 for a point span)."""
        return self.end - self.start

    def slice(self, source: str) -> str:
        """Return the covered text of ``source`` (may be shorter near EOF)."""
        return source[self.start : self.end]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough information for
    both human-readable rendering and tooling.

    Attributes:
        code: Parse error kind
        message: Human-readable error description
        span: Offending character range in the input
        hint: Suggestion for fixing the input
        severity: Error severity level
    """

    code: ParseErrorKind
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self, source: str | None = None) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[INVALID_HIGH_VALUE]: Invalid value range. Value is too high.
              --> characters 11..13
               |
               | 2015-01-20T25:35:20-08:00
               |            ^^
              = help: Hour must be between 00 and 23, got 25

        Args:
            source: Parsed input, echoed under the span when given

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self, source)

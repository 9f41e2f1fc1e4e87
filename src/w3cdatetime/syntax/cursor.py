"""Immutable cursor infrastructure for W3C date-time scanning.

Implements the immutable cursor pattern for forward-only parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor, so a failed scan can never leave
      the caller's position half-consumed
    - Positions are code point offsets into the original ``str``

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("2015-03-04", 0)
        >>> cursor.slice_ahead(4)
        '2015'
        >>> new_cursor = cursor.advance(4)
        >>> new_cursor.peek()
        '-'
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> Cursor("2015", 4).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def remaining(self) -> int:
        """Number of characters left before end of input."""
        return max(len(self.source) - self.pos, 0)

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF).

        Example:
            >>> cursor = Cursor("12:30", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(10).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer than n characters near EOF; width checks compare
        against ``remaining`` rather than the slice length.
        """
        return self.source[self.pos : self.pos + n]

    def starts_with(self, token: str) -> bool:
        """Check whether the input at this position begins with token."""
        return self.source.startswith(token, self.pos)

    def take_while(self, chars: frozenset[str]) -> str:
        """Longest run starting here whose characters all belong to chars."""
        end = self.pos
        source = self.source
        while end < len(source) and source[end] in chars:
            end += 1
        return source[self.pos : end]


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Scanner result containing scanned value and new cursor position.

    Type Parameters:
        T: The type of the scanned value

    Pattern:
        Every scanner has signature:
            def scan_foo(cursor: Cursor, ...) -> ParseResult[Foo]:
                ...
                return ParseResult(value, cursor.advance(width))

    Example:
        >>> cursor = Cursor("15:34", 0)
        >>> result = ParseResult(15, cursor.advance(2))
        >>> result.value
        15
        >>> result.cursor.peek()
        ':'
    """

    value: T
    cursor: Cursor

"""W3C date-time syntax package.

Provides the immutable cursor, the field scanners, and the grammar driver.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .parser import parse_w3c_datetime

__all__ = [
    "Cursor",
    "ParseResult",
    "parse_w3c_datetime",
]

"""w3cdatetime - W3C profile ISO 8601 date-time parsing and formatting.

Parses the W3C date-time profile (https://www.w3.org/TR/NOTE-datetime) into
nanosecond-precision timestamps with a fixed UTC offset, reporting failures
as a single diagnostic with an exact character span.

Public API:
    parse_w3c_datetime - Parse text to (W3CDateTime | None, errors)
    format_w3c - Render a timestamp (or aware datetime) in canonical form
    W3CDateTime - Resolved timestamp value type

Exceptions:
    W3CError - Base exception class
    W3CParseError - Parse failure with kind and span (returned, not raised)

Submodules:
    w3cdatetime.syntax - Cursor, field scanners, grammar driver
    w3cdatetime.diagnostics - Error kinds, spans, templates, formatter
"""

from .diagnostics import (
    Diagnostic,
    DiagnosticFormatter,
    OutputFormat,
    ParseErrorKind,
    SourceSpan,
    W3CError,
    W3CParseError,
)
from .formatting import format_w3c
from .syntax import parse_w3c_datetime
from .timestamp import W3CDateTime

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("w3cdatetime")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# W3C profile conformance
__spec_url__ = "https://www.w3.org/TR/NOTE-datetime"

__all__ = [
    "Diagnostic",
    "DiagnosticFormatter",
    "OutputFormat",
    "ParseErrorKind",
    "SourceSpan",
    "W3CDateTime",
    "W3CError",
    "W3CParseError",
    "__spec_url__",
    "__version__",
    "format_w3c",
    "parse_w3c_datetime",
]

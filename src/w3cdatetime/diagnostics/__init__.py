"""Diagnostic system for W3C date-time parse errors.

Provides structured error diagnostics with kinds, spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ParseErrorKind, SourceSpan
from .errors import W3CError, W3CParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "ParseErrorKind",
    "SourceSpan",
    "W3CError",
    "W3CParseError",
]

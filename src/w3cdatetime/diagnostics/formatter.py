"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from w3cdatetime.constants import MAX_DIAGNOSTIC_CONTENT_LENGTH

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 controls and DEL, rendered as escapes so echoed input cannot inject
# terminal sequences or fake log lines.
_CONTROL_ESCAPES: dict[int, str] = {
    **{code: f"\\x{code:02x}" for code in range(0x20)},
    0x7F: "\\x7f",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
}


def _escape_control(text: str) -> str:
    return text.translate(_CONTROL_ESCAPES)


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    sanitization options.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate echoed input to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum echoed input length when sanitizing

    Example:
        >>> _, (error,) = parse_w3c_datetime("2015-01-20T25:35:20-08:00")
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(error.diagnostic, error.input_value))
        error[INVALID_HIGH_VALUE]: Invalid value range. Value is too high.
          --> characters 11..13
           |
           | 2015-01-20T25:35:20-08:00
           |            ^^
          = help: Hour must be between 00 and 23, got 25

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(error.diagnostic))
        INVALID_HIGH_VALUE at 11..13: Invalid value range. Value is too high.
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = MAX_DIAGNOSTIC_CONTENT_LENGTH

    def format(self, diagnostic: Diagnostic, source: str | None = None) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format
            source: Parsed input; echoed with a span marker by the rust style

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic, source)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic, source)

    def format_all(self, diagnostics: Iterable[Diagnostic], source: str | None = None) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format
            source: Parsed input shared by all diagnostics

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d, source) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic, source: str | None) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[INVALID_TOKEN]: Unexpected token.
              --> characters 10..11
               |
               | 2015-03-04Z
               |           ^
              = help: Expected 'T'
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        span = diagnostic.span
        if span is not None:
            parts.append(f"  --> characters {span.start}..{span.end}")
            if source is not None:
                echoed = self._maybe_sanitize(source)
                # Marker is placed by code point; escapes widen the prefix.
                prefix = _escape_control(echoed[: span.start])
                covered = _escape_control(echoed[span.start : span.end])
                marker = "^" * max(len(covered), 1)
                parts.append("   |")
                parts.append(f"   | {_escape_control(echoed)}")
                parts.append(f"   | {' ' * len(prefix)}{marker}")

        if diagnostic.hint:
            parts.append(f"  = help: {_escape_control(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            INVALID_TOKEN at 10..11: Unexpected token.
        """
        if diagnostic.span is None:
            return f"{diagnostic.code.name}: {diagnostic.message}"
        span = diagnostic.span
        return f"{diagnostic.code.name} at {span.start}..{span.end}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic, source: str | None) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "INVALID_TOKEN", "code_value": 1102, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        if source is not None:
            data["input"] = self._maybe_sanitize(source)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text

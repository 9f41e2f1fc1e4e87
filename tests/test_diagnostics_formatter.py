"""Tests for diagnostics/formatter.py: rust, simple and JSON rendering.

Python 3.13+.
"""

from __future__ import annotations

import json

from w3cdatetime import parse_w3c_datetime
from w3cdatetime.diagnostics import (
    Diagnostic,
    DiagnosticFormatter,
    OutputFormat,
    ParseErrorKind,
    SourceSpan,
    W3CParseError,
)


def _error(text: str) -> W3CParseError:
    _, errors = parse_w3c_datetime(text)
    return errors[0]


class TestRustFormat:
    """Compiler-style output with the input echoed under the span."""

    def test_full_layout(self) -> None:
        error = _error("2015-01-20T25:35:20-08:00")
        output = DiagnosticFormatter().format(error.diagnostic, error.input_value)
        assert output.splitlines() == [
            "error[INVALID_HIGH_VALUE]: Invalid value range. Value is too high.",
            "  --> characters 11..13",
            "   |",
            "   | 2015-01-20T25:35:20-08:00",
            "   | " + " " * 11 + "^^",
            "  = help: Hour must be between 00 and 23, got 25",
        ]

    def test_point_span_gets_single_marker(self) -> None:
        error = _error("2015-03-04T15:34:45Zxx")
        lines = DiagnosticFormatter().format(error.diagnostic, error.input_value).splitlines()
        assert lines[-2] == "   | " + " " * 20 + "^"

    def test_without_source_omits_echo(self) -> None:
        error = _error("2015-03-04Z")
        output = DiagnosticFormatter().format(error.diagnostic)
        assert "   |" not in output
        assert "  --> characters 10..11" in output

    def test_control_characters_escaped(self) -> None:
        error = _error("2015-03-04\n15:34Z")
        lines = DiagnosticFormatter().format(error.diagnostic, error.input_value).splitlines()
        assert "   | 2015-03-04\\n15:34Z" in lines
        marker_line = lines[lines.index("   | 2015-03-04\\n15:34Z") + 1]
        assert marker_line == "   | " + " " * 10 + "^^"

    def test_color(self) -> None:
        error = _error("2015-03-04Z")
        output = DiagnosticFormatter(color=True).format(error.diagnostic)
        assert output.startswith("\033[1;31merror\033[0m[INVALID_TOKEN]")

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(
            code=ParseErrorKind.INVALID_FORMAT,
            message="Invalid format.",
            severity="warning",
        )
        output = DiagnosticFormatter().format(diagnostic)
        assert output == "warning[INVALID_FORMAT]: Invalid format."

    def test_sanitize_truncates_echo(self) -> None:
        source = "2015-03-04Z" + "x" * 50
        error = _error(source)
        formatter = DiagnosticFormatter(sanitize=True, max_content_length=11)
        lines = formatter.format(error.diagnostic, error.input_value).splitlines()
        assert "   | 2015-03-04Z..." in lines


class TestSimpleFormat:
    """Single-line output."""

    def test_with_span(self) -> None:
        error = _error("2015-03-04Z")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(error.diagnostic, error.input_value) == (
            "INVALID_TOKEN at 10..11: Unexpected token."
        )

    def test_without_span(self) -> None:
        diagnostic = Diagnostic(code=ParseErrorKind.INVALID_FORMAT, message="Invalid format.")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == "INVALID_FORMAT: Invalid format."


class TestJsonFormat:
    """Machine-readable output."""

    def test_fields(self) -> None:
        error = _error("2015-01-20T17:35:20.000000000452-08:00")
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(error.diagnostic, error.input_value))
        assert data["code"] == "INVALID_NANOSECONDS"
        assert data["code_value"] == 1007
        assert data["severity"] == "error"
        assert (data["start"], data["end"]) == (20, 32)
        assert data["input"] == "2015-01-20T17:35:20.000000000452-08:00"
        assert "hint" in data

    def test_non_ascii_kept(self) -> None:
        error = _error("2015-01-01T10:00:00.5é")
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        output = formatter.format(error.diagnostic, error.input_value)
        assert "é" in output
        assert json.loads(output)["start"] == 21

    def test_no_source_no_input_key(self) -> None:
        diagnostic = Diagnostic(
            code=ParseErrorKind.STRING_NOT_ENDED,
            message="m",
            span=SourceSpan(3, 3),
        )
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert "input" not in data
        assert "hint" not in data


class TestFormatAll:
    """Multiple diagnostics joined by blank lines."""

    def test_joined(self) -> None:
        first = _error("2015-03-04Z").diagnostic
        second = _error("2015-13-01").diagnostic
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all([first, second]) == (
            "INVALID_TOKEN at 10..11: Unexpected token.\n\n"
            "INVALID_HIGH_VALUE at 5..7: Invalid value range. Value is too high."
        )

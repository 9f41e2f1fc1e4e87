"""Fuzz testing infrastructure for w3cdatetime.

This package contains:
- test_parser_property: Round-trip, differential and robustness properties
  of parse_w3c_datetime() and format_w3c()

Run with: pytest -m fuzz

Python 3.13+.
"""

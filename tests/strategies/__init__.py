"""Hypothesis strategies for w3cdatetime property-based testing.

Strategies are organized by domain:

- w3c: Canonical W3C strings, field tuples, and noise input

Usage:
    from tests.strategies import canonical_w3c_strings, w3c_noise

Event-Emitting Strategies (HypoFuzz-Optimized):
    canonical_w3c_strings emits hypothesis.event() calls for the fraction
    and offset branches it takes.
"""

from .w3c import (
    calendar_dates,
    canonical_w3c_strings,
    nanoseconds,
    offset_deltas,
    offset_seconds,
    w3c_fields,
    w3c_noise,
)

__all__ = [
    "calendar_dates",
    "canonical_w3c_strings",
    "nanoseconds",
    "offset_deltas",
    "offset_seconds",
    "w3c_fields",
    "w3c_noise",
]

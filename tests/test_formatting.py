"""Tests for formatting.py: canonical W3C output.

Python 3.13+.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from w3cdatetime import W3CDateTime, format_w3c


def _at(nanosecond: int, offset_seconds: int = 0) -> W3CDateTime:
    """Local clock 2015-01-20T17:35:20 plus nanosecond, at the given offset."""
    local = datetime(
        2015, 1, 20, 17, 35, 20, nanosecond // 1000,
        tzinfo=timezone(timedelta(seconds=offset_seconds)),
    )
    return W3CDateTime.from_datetime(local, nanosecond=nanosecond)


class TestFraction:
    """Shortest exact precision out of 3, 6 or 9 digits."""

    @pytest.mark.parametrize(
        ("nanosecond", "suffix"),
        [
            (0, ""),
            (1_000_000, ".001"),
            (500_000_000, ".500"),
            (31_000, ".000031"),
            (123_456_000, ".123456"),
            (4, ".000000004"),
            (999_999_999, ".999999999"),
            (100_000_010, ".100000010"),
        ],
    )
    def test_width(self, nanosecond: int, suffix: str) -> None:
        assert format_w3c(_at(nanosecond)) == f"2015-01-20T17:35:20{suffix}Z"


class TestOffset:
    """Zone designator rendering."""

    @pytest.mark.parametrize(
        ("offset_seconds", "designator"),
        [
            (0, "Z"),
            (-8 * 3600, "-08:00"),
            (5 * 3600 + 30 * 60, "+05:30"),
            (-(12 * 3600 + 59 * 60), "-12:59"),
            (45 * 60, "+00:45"),
        ],
    )
    def test_designator(self, offset_seconds: int, designator: str) -> None:
        assert format_w3c(_at(0, offset_seconds)).endswith("T17:35:20" + designator)

    def test_date_shown_on_local_clock(self) -> None:
        value = W3CDateTime(
            utc=datetime(2015, 1, 21, 1, 35, 20, tzinfo=UTC),
            nanosecond=0,
            offset_seconds=-8 * 3600,
        )
        assert format_w3c(value) == "2015-01-20T17:35:20-08:00"


class TestYearPadding:
    """Years below 1000 are zero padded to four digits."""

    def test_small_year(self) -> None:
        value = W3CDateTime.from_datetime(datetime(44, 3, 15, tzinfo=UTC))
        assert format_w3c(value) == "0044-03-15T00:00:00Z"


class TestDatetimeInput:
    """Aware stdlib datetimes are accepted directly."""

    def test_aware_datetime(self) -> None:
        source = datetime(2001, 9, 11, 9, 45, tzinfo=timezone(timedelta(hours=-8)))
        assert format_w3c(source) == "2001-09-11T09:45:00-08:00"

    def test_microseconds_use_shortest_width(self) -> None:
        assert format_w3c(datetime(2015, 1, 1, 0, 0, 0, 8000, tzinfo=UTC)) == (
            "2015-01-01T00:00:00.008Z"
        )

    def test_naive_datetime_rejected(self) -> None:
        with pytest.raises(ValueError, match="naive"):
            format_w3c(datetime(2015, 1, 1))

    def test_sub_minute_offset_rejected(self) -> None:
        tz = timezone(timedelta(minutes=30, seconds=15))
        with pytest.raises(ValueError, match="whole number of minutes"):
            format_w3c(datetime(2015, 1, 1, tzinfo=tz))

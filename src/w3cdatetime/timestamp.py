"""Resolved W3C timestamp value type.

Calendar arithmetic and validity checks are delegated to the standard
library ``datetime`` module. Its resolution stops at microseconds, so the
timestamp carries the full nanosecond of second next to the stdlib instant.

Thread-safe. Immutable.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

from w3cdatetime.constants import (
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_SECOND,
    SECONDS_PER_MINUTE,
)

__all__ = ["W3CDateTime"]


@dataclass(frozen=True, slots=True)
class W3CDateTime:
    """A calendar instant with nanosecond precision and a fixed UTC offset.

    The instant is stored in UTC; the offset is kept for display only.
    Calendar fields (year .. second) are read on the local clock, i.e. the
    UTC instant shifted by the offset, which is what the parsed text showed.

    Equality is structural: the same instant written with two different
    offsets compares unequal, mirroring the textual forms.

    Attributes:
        utc: Aware datetime in UTC; microsecond must equal nanosecond // 1000
        nanosecond: Nanosecond of second (0 .. 999_999_999)
        offset_seconds: Offset east of UTC in seconds

    Example:
        >>> value, _ = parse_w3c_datetime("2015-01-20T17:35:20.000000004-08:00")
        >>> value.hour, value.nanosecond, value.offset_seconds
        (17, 4, -28800)
        >>> value.utc
        datetime.datetime(2015, 1, 21, 1, 35, 20, tzinfo=datetime.timezone.utc)
        >>> str(value)
        '2015-01-20T17:35:20.000000004-08:00'
    """

    utc: datetime
    nanosecond: int
    offset_seconds: int

    def __post_init__(self) -> None:
        """Validate W3CDateTime invariants.

        Raises:
            ValueError: If utc is not aware UTC, nanosecond is out of range or
                disagrees with utc.microsecond, or the offset is a day or more.
        """
        if self.utc.utcoffset() != timedelta(0):
            msg = f"W3CDateTime.utc must be an aware UTC datetime, got {self.utc!r}"
            raise ValueError(msg)
        if not 0 <= self.nanosecond < NANOSECONDS_PER_SECOND:
            msg = f"W3CDateTime.nanosecond must be in [0, 10**9), got {self.nanosecond}"
            raise ValueError(msg)
        if self.nanosecond // NANOSECONDS_PER_MICROSECOND != self.utc.microsecond:
            msg = (
                f"W3CDateTime.nanosecond ({self.nanosecond}) does not match "
                f"utc.microsecond ({self.utc.microsecond})"
            )
            raise ValueError(msg)
        if abs(self.offset_seconds) >= 24 * 60 * SECONDS_PER_MINUTE:
            msg = f"W3CDateTime.offset_seconds must be under one day, got {self.offset_seconds}"
            raise ValueError(msg)

    @classmethod
    def from_datetime(cls, value: datetime, nanosecond: int | None = None) -> "W3CDateTime":
        """Build a timestamp from an aware stdlib datetime.

        Args:
            value: Aware datetime whose offset is a whole number of minutes
            nanosecond: Full nanosecond of second; defaults to
                value.microsecond * 1000 and must agree with it when given

        Returns:
            W3CDateTime at the same instant and offset

        Raises:
            ValueError: If value is naive, its offset cannot be written as
                ±hh:mm, or nanosecond disagrees with value.microsecond
            OverflowError: If the UTC instant falls outside years 1..9999
        """
        offset = value.utcoffset()
        if offset is None:
            msg = f"Cannot build W3CDateTime from naive datetime {value!r}"
            raise ValueError(msg)
        if offset % timedelta(minutes=1):
            msg = f"UTC offset {offset} is not a whole number of minutes"
            raise ValueError(msg)
        if nanosecond is None:
            nanosecond = value.microsecond * NANOSECONDS_PER_MICROSECOND
        return cls(
            utc=value.astimezone(UTC),
            nanosecond=nanosecond,
            offset_seconds=int(offset.total_seconds()),
        )

    @property
    def tzinfo(self) -> timezone:
        """Fixed-offset tzinfo for the parsed offset (UTC when zero)."""
        if self.offset_seconds == 0:
            return UTC
        return timezone(timedelta(seconds=self.offset_seconds))

    def to_datetime(self) -> datetime:
        """Aware datetime on the local clock, truncated to microseconds."""
        return self.utc.astimezone(self.tzinfo)

    @property
    def year(self) -> int:
        return self.to_datetime().year

    @property
    def month(self) -> int:
        return self.to_datetime().month

    @property
    def day(self) -> int:
        return self.to_datetime().day

    @property
    def hour(self) -> int:
        return self.to_datetime().hour

    @property
    def minute(self) -> int:
        return self.to_datetime().minute

    @property
    def second(self) -> int:
        return self.to_datetime().second

    def isoformat(self) -> str:
        """Canonical W3C text, see format_w3c()."""
        from w3cdatetime.formatting import format_w3c  # noqa: PLC0415 - circular

        return format_w3c(self)

    def __str__(self) -> str:
        return self.isoformat()

"""Shared types: Instant, Field and DateParseError."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _timedelta_nanos(delta: timedelta) -> int:
    """Exact nanosecond count of a timedelta (no float rounding)."""
    seconds = delta.days * 86_400 + delta.seconds
    return seconds * NANOS_PER_SECOND + delta.microseconds * NANOS_PER_MICROSECOND


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


@dataclass(frozen=True, order=True)
class Instant:
    """Absolute point in time. Immutable.

    Stored as integer nanoseconds since 1970-01-01T00:00:00Z so that
    sub-second writes are exact. No calendar semantics are attached:
    every field read goes through a CalendarContext.
    """

    nanoseconds: int

    @property
    def seconds(self) -> float:
        """Signed seconds since the Unix epoch."""
        return self.nanoseconds / NANOS_PER_SECOND

    @classmethod
    def from_timestamp(cls, value: int | float, unix: bool = True) -> Instant:
        """Build from a Unix timestamp in seconds (unix=True) or milliseconds.

        Integer inputs convert exactly.
        """
        scale = NANOS_PER_SECOND if unix else NANOS_PER_MILLISECOND
        if isinstance(value, int):
            return cls(value * scale)
        return cls(round(value * scale))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Build from a timezone-aware datetime.

        Raises TypeError for naive datetimes: without a zone the wall time
        has no absolute meaning. Use CalendarContext.from_local instead.
        """
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise TypeError(
                f"dt must be timezone-aware, got naive {dt.isoformat()}. "
                f"Interpret wall-clock values through a CalendarContext."
            )
        return cls(_timedelta_nanos(dt - UNIX_EPOCH))

    @classmethod
    def now(cls, clock=None) -> Instant:
        """Current instant from `clock` (system clock by default)."""
        if clock is None:
            from calendar_fields.clock import SystemClock

            clock = SystemClock()
        return clock.now()

    @property
    def subsecond_nanos(self) -> int:
        """Nanoseconds past the whole second, 0..999_999_999."""
        return self.nanoseconds % NANOS_PER_SECOND

    def to_datetime(self) -> datetime:
        """UTC datetime. Drops precision finer than a microsecond."""
        micros = self.nanoseconds // NANOS_PER_MICROSECOND
        return UNIX_EPOCH + timedelta(microseconds=micros)

    def __add__(self, other: timedelta) -> Instant:
        if not isinstance(other, timedelta):
            return NotImplemented
        return Instant(self.nanoseconds + _timedelta_nanos(other))

    def __sub__(self, other):
        if isinstance(other, Instant):
            return timedelta(
                microseconds=(self.nanoseconds - other.nanoseconds)
                // NANOS_PER_MICROSECOND
            )
        if isinstance(other, timedelta):
            return Instant(self.nanoseconds - _timedelta_nanos(other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"Instant({self.nanoseconds}ns)"


class Field(Enum):
    """Named calendar component of an Instant."""

    ERA = "era"
    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK_OF_YEAR = "week_of_year"
    WEEK_OF_MONTH = "week_of_month"
    WEEKDAY = "weekday"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    NANOSECOND = "nanosecond"

    @property
    def parent(self) -> Field | None:
        """Unit that bounds this field's legal range. None for era and year."""
        return _PARENTS.get(self)

    @property
    def is_week(self) -> bool:
        return self in (Field.WEEK_OF_YEAR, Field.WEEK_OF_MONTH)


_PARENTS: dict[Field, Field] = {
    Field.QUARTER: Field.YEAR,
    Field.MONTH: Field.YEAR,
    Field.WEEK_OF_YEAR: Field.YEAR,
    Field.WEEK_OF_MONTH: Field.MONTH,
    Field.WEEKDAY: Field.WEEK_OF_YEAR,
    Field.DAY: Field.MONTH,
    Field.HOUR: Field.DAY,
    Field.MINUTE: Field.HOUR,
    Field.SECOND: Field.MINUTE,
    Field.MILLISECOND: Field.SECOND,
    Field.NANOSECOND: Field.SECOND,
}


class DateParseError(ValueError):
    """Raised when text cannot be turned into an Instant.

    Raised in every configuration: a malformed timestamp is never replaced
    by the current time.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r} as a date: {reason}")

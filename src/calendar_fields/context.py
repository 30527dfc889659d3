"""Boundary: CalendarContext, converting Instants to local wall-clock time and back."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.tz import tzlocal

from calendar_fields.types import NANOS_PER_MICROSECOND, Instant

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")
_LOCALE_VARS = ("LC_ALL", "LC_TIME", "LANG")


def parse_timezone(name: str) -> tzinfo:
    """Resolve a timezone name.

    Accepts "local" (host zone), "UTC"/"GMT"/"Z", fixed offsets such as
    "+08:00" or "-0530", and IANA keys ("Europe/Berlin").
    Raises ValueError for anything else.
    """
    if name == "local":
        return _host_timezone()
    if name in ("UTC", "GMT", "Z"):
        return timezone.utc

    m = _OFFSET_RE.match(name)
    if m:
        sign = -1 if m.group(1) == "-" else 1
        hours, minutes = int(m.group(2)), int(m.group(3))
        if hours > 23 or minutes > 59:
            raise ValueError(f"Offset out of range: {name}")
        return timezone(sign * timedelta(hours=hours, minutes=minutes))

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name!r}") from e


def _host_timezone() -> tzinfo:
    """Host zone: $TZ when it names an IANA zone, else the system local rules.

    tzlocal() follows the host's DST transitions, so instants on either
    side of a change read with their own offset.
    """
    key = os.environ.get("TZ")
    if key:
        try:
            return ZoneInfo(key.lstrip(":"))
        except (ZoneInfoNotFoundError, ValueError):
            pass
    return tzlocal()


def _host_locale() -> str:
    for var in _LOCALE_VARS:
        value = os.environ.get(var)
        if value:
            name = value.split(".")[0].split("@")[0]
            if name in ("C", "POSIX"):
                return "en_US"
            return name
    return "en_US"


@dataclass(frozen=True)
class CalendarContext:
    """Timezone and week conventions used to read an Instant's fields. Immutable.

    first_weekday follows the 1 = Sunday ... 7 = Saturday numbering used by
    the WEEKDAY field. min_days_in_first_week decides which week counts as
    week 1 of a year or month (1 = the week holding the 1st, 4 = ISO 8601).
    """

    tz: tzinfo = timezone.utc
    first_weekday: int = 1
    min_days_in_first_week: int = 1
    locale: str = "en_US"

    def __post_init__(self) -> None:
        if not 1 <= self.first_weekday <= 7:
            raise ValueError(
                f"first_weekday must be 1-7 (1 = Sunday), got {self.first_weekday}"
            )
        if not 1 <= self.min_days_in_first_week <= 7:
            raise ValueError(
                f"min_days_in_first_week must be 1-7, "
                f"got {self.min_days_in_first_week}"
            )

    @classmethod
    def system(cls) -> CalendarContext:
        """Host defaults: local zone, Sunday-first weeks, environment locale."""
        return cls(tz=_host_timezone(), locale=_host_locale())

    @classmethod
    def utc(cls) -> CalendarContext:
        return cls(tz=timezone.utc, locale="en_US")

    @classmethod
    def iso(cls, tz: tzinfo = timezone.utc) -> CalendarContext:
        """Monday-first weeks with ISO 8601 week numbering."""
        return cls(tz=tz, first_weekday=2, min_days_in_first_week=4)

    def to_local(self, instant: Instant) -> datetime:
        """Aware wall-clock datetime in this context's zone."""
        return instant.to_datetime().astimezone(self.tz)

    def from_local(self, dt: datetime, nanos: int = 0) -> Instant:
        """Instant for a wall-clock datetime.

        Naive datetimes are read in this context's zone. `nanos` adds the
        sub-microsecond part a datetime cannot carry (0..999).
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=self.tz)
        base = Instant.from_datetime(dt)
        if nanos:
            return Instant(base.nanoseconds + nanos)
        return base

    def carry_nanos(self, instant: Instant) -> int:
        """Sub-microsecond remainder lost by to_local()."""
        return instant.nanoseconds % NANOS_PER_MICROSECOND


def resolve(context: CalendarContext | None) -> CalendarContext:
    """The given context, or the host default when omitted."""
    if context is None:
        return CalendarContext.system()
    return context

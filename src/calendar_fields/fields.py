"""Field Accessor: read calendar components of an Instant."""

from __future__ import annotations

import math
from datetime import MAXYEAR, MINYEAR, date, timedelta

from calendar_fields.context import CalendarContext, resolve
from calendar_fields.types import NANOS_PER_MILLISECOND, Field, Instant

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month of a given year.

    Raises ValueError for a month outside 1-12. That is a caller bug, not a
    runtime condition, so there is no sentinel return.
    """
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise ValueError(f"Illegal month: {month} (must be 1-12)")


def weekday_number(d: date) -> int:
    """Weekday as 1 = Sunday ... 7 = Saturday."""
    return (d.weekday() + 1) % 7 + 1


def week_start(d: date, context: CalendarContext) -> date:
    """The context's first weekday on or before d."""
    offset = (weekday_number(d) - context.first_weekday) % 7
    return d - timedelta(days=offset)


def _first_week_start(anchor: date, context: CalendarContext) -> date:
    """Start of week 1 for the year or month beginning at `anchor`.

    The week holding `anchor` is week 1 only if at least
    min_days_in_first_week of its days fall on or after `anchor`.
    """
    start = week_start(anchor, context)
    days_inside = 7 - (anchor - start).days
    if days_inside < context.min_days_in_first_week:
        start += timedelta(days=7)
    return start


def week_of_year(d: date, context: CalendarContext) -> int:
    start = _first_week_start(date(d.year, 1, 1), context)
    if d < start:
        if d.year == MINYEAR:
            return 0
        start = _first_week_start(date(d.year - 1, 1, 1), context)
    elif d.year < MAXYEAR:
        next_start = _first_week_start(date(d.year + 1, 1, 1), context)
        if d >= next_start:
            return 1
    return (d - start).days // 7 + 1


def week_of_month(d: date, context: CalendarContext) -> int:
    """Week number within the month; 0 for days before the first full week."""
    start = _first_week_start(d.replace(day=1), context)
    if d < start:
        return 0
    return (d - start).days // 7 + 1


def get(field: Field, instant: Instant, context: CalendarContext | None = None) -> int:
    """Calendar value of `field` for `instant`. Total for every field."""
    context = resolve(context)
    if field is Field.NANOSECOND:
        return instant.subsecond_nanos
    if field is Field.MILLISECOND:
        return instant.subsecond_nanos // NANOS_PER_MILLISECOND

    local = context.to_local(instant)
    if field is Field.ERA:
        # datetime only spans years 1-9999, all Common Era
        return 1
    if field is Field.YEAR:
        return local.year
    if field is Field.QUARTER:
        return math.ceil(local.month / 3.0)
    if field is Field.MONTH:
        return local.month
    if field is Field.WEEK_OF_YEAR:
        return week_of_year(local.date(), context)
    if field is Field.WEEK_OF_MONTH:
        return week_of_month(local.date(), context)
    if field is Field.WEEKDAY:
        return weekday_number(local.date())
    if field is Field.DAY:
        return local.day
    if field is Field.HOUR:
        return local.hour
    if field is Field.MINUTE:
        return local.minute
    if field is Field.SECOND:
        return local.second
    raise TypeError(f"Not a Field: {field!r}")


def quarter(instant: Instant, context: CalendarContext | None = None) -> int:
    return get(Field.QUARTER, instant, context)


def components(
    instant: Instant, context: CalendarContext | None = None
) -> dict[Field, int]:
    """Every field of `instant` at once."""
    context = resolve(context)
    return {f: get(f, instant, context) for f in Field}


def utc_offset(instant: Instant, context: CalendarContext | None = None) -> int:
    """Seconds east of UTC in effect at `instant`."""
    local = resolve(context).to_local(instant)
    return int(local.utcoffset().total_seconds())


def days_in_current_month(
    instant: Instant, context: CalendarContext | None = None
) -> int:
    local = resolve(context).to_local(instant)
    return days_in_month(local.year, local.month)

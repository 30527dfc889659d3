"""Rounding & Arithmetic Helper: grid rounding, unit addition, differences."""

from __future__ import annotations

from collections.abc import Iterable

from calendar_fields.context import CalendarContext, resolve
from calendar_fields.types import NANOS_PER_SECOND, Field, Instant, trunc_div
from calendar_fields.units import ELAPSED_NANOS, shift

# grid size -> smallest remainder that rounds up
GRID_HALVES: dict[int, int] = {5: 3, 10: 6, 15: 8, 30: 15, 60: 30}

DIFFERENCE_UNITS: tuple[Field, ...] = (
    Field.YEAR,
    Field.MONTH,
    Field.DAY,
    Field.HOUR,
    Field.MINUTE,
    Field.SECOND,
    Field.NANOSECOND,
)


# ----------------------------------------------------------------------
# Rounding
# ----------------------------------------------------------------------

def nearest_minute_grid(
    instant: Instant,
    grid_minutes: int,
    context: CalendarContext | None = None,
) -> Instant:
    """Round to the nearest multiple of `grid_minutes` within the hour.

    A minute whose remainder is below the grid's half point rounds down,
    otherwise up (5 -> 3, 10 -> 6, 15 -> 8, 30 -> 15). The 60-minute grid
    compares the minute with 30 and rounds to the hour. Seconds and
    sub-seconds are always dropped.

    Raises ValueError for grids other than 5, 10, 15, 30, 60.
    """
    try:
        half = GRID_HALVES[grid_minutes]
    except KeyError:
        raise ValueError(
            f"grid_minutes must be one of {sorted(GRID_HALVES)}, got {grid_minutes}"
        ) from None

    context = resolve(context)
    local = context.to_local(instant)
    hour_start = local.replace(minute=0, second=0, microsecond=0)

    if grid_minutes == 60:
        rounded = context.from_local(hour_start)
        if local.minute < half:
            return rounded
        return shift(rounded, Field.HOUR, 1, context)

    remainder = local.minute % grid_minutes
    if remainder < half:
        minute = local.minute - remainder
    else:
        minute = local.minute + grid_minutes - remainder
    if minute == 60:
        return shift(context.from_local(hour_start), Field.HOUR, 1, context)
    # replace() keeps the fold of a repeated fall-back hour
    return context.from_local(hour_start.replace(minute=minute))


def nearest_five_minutes(instant: Instant, context: CalendarContext | None = None) -> Instant:
    return nearest_minute_grid(instant, 5, context)


def nearest_ten_minutes(instant: Instant, context: CalendarContext | None = None) -> Instant:
    return nearest_minute_grid(instant, 10, context)


def nearest_quarter_hour(instant: Instant, context: CalendarContext | None = None) -> Instant:
    return nearest_minute_grid(instant, 15, context)


def nearest_half_hour(instant: Instant, context: CalendarContext | None = None) -> Instant:
    return nearest_minute_grid(instant, 30, context)


def nearest_hour(instant: Instant, context: CalendarContext | None = None) -> Instant:
    return nearest_minute_grid(instant, 60, context)


# ----------------------------------------------------------------------
# Unit addition
# ----------------------------------------------------------------------

def add(
    instant: Instant,
    field: Field,
    value: int,
    context: CalendarContext | None = None,
) -> Instant:
    """Advance by `value` whole units of `field` (negative goes back).

    No range validation: 40 days past a month end simply rolls into later
    months. Month and year steps clamp the day to the target month's
    length. Raises ValueError for ERA.
    """
    return shift(instant, field, value, context)


def yesterday(instant: Instant, context: CalendarContext | None = None) -> Instant:
    return shift(instant, Field.DAY, -1, context)


def tomorrow(instant: Instant, context: CalendarContext | None = None) -> Instant:
    return shift(instant, Field.DAY, 1, context)


# ----------------------------------------------------------------------
# Differences
# ----------------------------------------------------------------------

def _estimate(field: Field, cursor: Instant, end: Instant, context: CalendarContext) -> int:
    """First guess at the whole units of `field` between cursor and end."""
    if field in ELAPSED_NANOS:
        return trunc_div(end.nanoseconds - cursor.nanoseconds, ELAPSED_NANOS[field])
    a = context.to_local(cursor)
    b = context.to_local(end)
    if field is Field.YEAR:
        return b.year - a.year
    if field is Field.MONTH:
        return (b.year - a.year) * 12 + b.month - a.month
    return (b.date() - a.date()).days


def _overshoots(candidate: Instant, end: Instant, forward: bool) -> bool:
    return candidate > end if forward else candidate < end


def difference(
    start: Instant,
    end: Instant,
    units: Iterable[Field] = (Field.DAY,),
    context: CalendarContext | None = None,
) -> dict[Field, int]:
    """Signed calendar-component difference from `start` to `end`.

    Only the requested units appear in the result. Larger units are
    consumed first; each count is the largest whole number of units that
    does not step past `end`. Counts are negative when end < start.

    Raises ValueError for units other than year, month, day, hour, minute,
    second, nanosecond.
    """
    units = set(units)
    unknown = units.difference(DIFFERENCE_UNITS)
    if unknown:
        names = ", ".join(sorted(f.value for f in unknown))
        raise ValueError(f"Unsupported difference units: {names}")

    context = resolve(context)
    forward = end >= start
    step = 1 if forward else -1
    result: dict[Field, int] = {}
    cursor = start

    for field in DIFFERENCE_UNITS:
        if field not in units:
            continue
        count = _estimate(field, cursor, end, context)
        while count and _overshoots(shift(cursor, field, count, context), end, forward):
            count -= step
        while not _overshoots(shift(cursor, field, count + step, context), end, forward):
            count += step
        result[field] = count
        cursor = shift(cursor, field, count, context)

    return result


def number_of_days(instant: Instant, other: Instant, context: CalendarContext | None = None) -> int:
    """Whole days from `other` to `instant` (positive when instant is later)."""
    return difference(other, instant, (Field.DAY,), context)[Field.DAY]


def number_of_hours(instant: Instant, other: Instant, context: CalendarContext | None = None) -> int:
    return difference(other, instant, (Field.HOUR,), context)[Field.HOUR]


def number_of_minutes(instant: Instant, other: Instant, context: CalendarContext | None = None) -> int:
    return difference(other, instant, (Field.MINUTE,), context)[Field.MINUTE]


def number_of_seconds(instant: Instant, other: Instant, context: CalendarContext | None = None) -> int:
    return difference(other, instant, (Field.SECOND,), context)[Field.SECOND]


def elapsed_seconds(a: Instant, b: Instant) -> float:
    """Raw a - b in seconds. Ignores the calendar entirely."""
    return (a.nanoseconds - b.nanoseconds) / NANOS_PER_SECOND


def days_since(a: Instant, b: Instant) -> float:
    return elapsed_seconds(a, b) / 86_400


def hours_since(a: Instant, b: Instant) -> float:
    return elapsed_seconds(a, b) / 3600


def minutes_since(a: Instant, b: Instant) -> float:
    return elapsed_seconds(a, b) / 60

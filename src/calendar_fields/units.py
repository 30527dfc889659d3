"""Unit-aware shifting shared by the mutator, boundaries and arithmetic.

Calendar units (year, quarter, month, week, day) move the local wall clock
and keep the time of day. Month and year steps clamp to the last day of the
target month (Jan 31 + 1 month = Feb 28/29). Clock units (hour and finer)
move elapsed time.
"""

from __future__ import annotations

from datetime import timedelta

from dateutil.relativedelta import relativedelta

from calendar_fields.context import CalendarContext, resolve
from calendar_fields.types import (
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    Field,
    Instant,
)

ELAPSED_NANOS: dict[Field, int] = {
    Field.HOUR: 3600 * NANOS_PER_SECOND,
    Field.MINUTE: 60 * NANOS_PER_SECOND,
    Field.SECOND: NANOS_PER_SECOND,
    Field.MILLISECOND: NANOS_PER_MILLISECOND,
    Field.NANOSECOND: 1,
}


def _calendar_delta(field: Field, amount: int) -> relativedelta | timedelta:
    if field is Field.YEAR:
        return relativedelta(years=amount)
    if field is Field.QUARTER:
        return relativedelta(months=3 * amount)
    if field is Field.MONTH:
        return relativedelta(months=amount)
    if field.is_week:
        return timedelta(days=7 * amount)
    # DAY and WEEKDAY both step whole days
    return timedelta(days=amount)


def shift(
    instant: Instant,
    field: Field,
    amount: int,
    context: CalendarContext | None = None,
) -> Instant:
    """Move `instant` by `amount` whole units of `field`.

    Raises ValueError for ERA (no meaningful unit) and OverflowError when
    the result leaves the years 1-9999.
    """
    if field is Field.ERA:
        raise ValueError("Cannot shift by era")
    if field in ELAPSED_NANOS:
        return Instant(instant.nanoseconds + amount * ELAPSED_NANOS[field])

    context = resolve(context)
    local = context.to_local(instant)
    try:
        moved = local + _calendar_delta(field, amount)
    except ValueError as e:
        # relativedelta reports an out-of-range year as ValueError
        raise OverflowError(str(e)) from e
    # wall-clock addition resets fold; keep the side of a repeated hour
    moved = moved.replace(fold=local.fold)
    return context.from_local(moved, context.carry_nanos(instant))

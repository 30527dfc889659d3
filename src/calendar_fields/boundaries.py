"""Period Boundary Calculator: first and last second of a containing period."""

from __future__ import annotations

import logging
from datetime import datetime, time, timedelta

from calendar_fields.context import CalendarContext, resolve
from calendar_fields.fields import week_start
from calendar_fields.types import NANOS_PER_SECOND, Field, Instant
from calendar_fields.units import shift

logger = logging.getLogger(__name__)

GRANULARITIES = frozenset({
    Field.SECOND,
    Field.MINUTE,
    Field.HOUR,
    Field.DAY,
    Field.WEEK_OF_YEAR,
    Field.WEEK_OF_MONTH,
    Field.MONTH,
    Field.YEAR,
})


def _start_of_day(local: datetime, context: CalendarContext) -> datetime:
    return datetime.combine(local.date(), time(0, 0), tzinfo=context.tz)


def beginning_of(
    granularity: Field,
    instant: Instant,
    context: CalendarContext | None = None,
) -> Instant | None:
    """First instant of the `granularity` period containing `instant`.

    Zeroes every field finer than the granularity. Weeks start on the
    context's first weekday. Returns None for granularities without a
    period (era, quarter, weekday, millisecond, nanosecond).
    """
    context = resolve(context)
    local = context.to_local(instant)

    if granularity is Field.SECOND:
        start = local.replace(microsecond=0)
    elif granularity is Field.MINUTE:
        start = local.replace(second=0, microsecond=0)
    elif granularity is Field.HOUR:
        start = local.replace(minute=0, second=0, microsecond=0)
    elif granularity is Field.DAY:
        start = _start_of_day(local, context)
    elif granularity.is_week:
        first = week_start(local.date(), context)
        start = datetime.combine(first, time(0, 0), tzinfo=context.tz)
    elif granularity is Field.MONTH:
        start = _start_of_day(local.replace(day=1), context)
    elif granularity is Field.YEAR:
        start = _start_of_day(local.replace(month=1, day=1), context)
    else:
        logger.debug("No period boundary for granularity %s", granularity.value)
        return None

    return context.from_local(start)


def end_of(
    granularity: Field,
    instant: Instant,
    context: CalendarContext | None = None,
) -> Instant | None:
    """Last whole second of the `granularity` period containing `instant`.

    Inclusive: end_of(DAY) is 23:59:59 of the same day, not the next
    midnight. Returns None for unsupported granularities and when the
    next period starts past year 9999.
    """
    context = resolve(context)
    if granularity not in GRANULARITIES:
        logger.debug("No period boundary for granularity %s", granularity.value)
        return None

    try:
        if granularity.is_week:
            start = beginning_of(granularity, instant, context)
            following = shift(start, Field.DAY, 7, context)
        else:
            following = beginning_of(
                granularity, shift(instant, granularity, 1, context), context
            )
    except OverflowError:
        logger.debug("No %s end for %r: next period out of range", granularity.value, instant)
        return None
    return Instant(following.nanoseconds - NANOS_PER_SECOND)


def period(
    granularity: Field,
    instant: Instant,
    context: CalendarContext | None = None,
) -> tuple[Instant, Instant] | None:
    """(beginning_of, end_of) pair, both inclusive."""
    context = resolve(context)
    start = beginning_of(granularity, instant, context)
    end = end_of(granularity, instant, context)
    if start is None or end is None:
        return None
    return (start, end)


def day_length(instant: Instant, context: CalendarContext | None = None) -> timedelta:
    """Elapsed length of the local day containing `instant` (23-25h across DST)."""
    context = resolve(context)
    start = beginning_of(Field.DAY, instant, context)
    return shift(start, Field.DAY, 1, context) - start

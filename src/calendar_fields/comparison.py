"""Predicates relating an Instant to the clock, to periods and to other Instants."""

from __future__ import annotations

import random

from calendar_fields.arithmetic import difference
from calendar_fields.boundaries import beginning_of
from calendar_fields.clock import Clock, resolve_clock
from calendar_fields.context import CalendarContext, resolve
from calendar_fields.fields import get
from calendar_fields.types import Field, Instant
from calendar_fields.units import shift

_WEEKEND = frozenset({1, 7})  # Sunday, Saturday


def is_in_future(instant: Instant, clock: Clock | None = None) -> bool:
    return instant > resolve_clock(clock).now()


def is_in_past(instant: Instant, clock: Clock | None = None) -> bool:
    return instant < resolve_clock(clock).now()


def is_same_period(
    granularity: Field,
    a: Instant,
    b: Instant,
    context: CalendarContext | None = None,
) -> bool:
    """True if a and b fall in the same `granularity` period.

    Raises ValueError for granularities without a period boundary.
    """
    context = resolve(context)
    start_a = beginning_of(granularity, a, context)
    if start_a is None:
        raise ValueError(f"No period for granularity {granularity.value}")
    return start_a == beginning_of(granularity, b, context)


def is_same_day(a: Instant, b: Instant, context: CalendarContext | None = None) -> bool:
    return is_same_period(Field.DAY, a, b, context)


def _is_day_offset(
    instant: Instant, days: int, clock: Clock | None, context: CalendarContext | None
) -> bool:
    context = resolve(context)
    reference = shift(resolve_clock(clock).now(), Field.DAY, days, context)
    return is_same_day(instant, reference, context)


def is_in_today(
    instant: Instant, clock: Clock | None = None, context: CalendarContext | None = None
) -> bool:
    return _is_day_offset(instant, 0, clock, context)


def is_in_yesterday(
    instant: Instant, clock: Clock | None = None, context: CalendarContext | None = None
) -> bool:
    return _is_day_offset(instant, -1, clock, context)


def is_in_tomorrow(
    instant: Instant, clock: Clock | None = None, context: CalendarContext | None = None
) -> bool:
    return _is_day_offset(instant, 1, clock, context)


def is_in_weekend(instant: Instant, context: CalendarContext | None = None) -> bool:
    return get(Field.WEEKDAY, instant, context) in _WEEKEND


def is_workday(instant: Instant, context: CalendarContext | None = None) -> bool:
    return not is_in_weekend(instant, context)


def is_in_current(
    granularity: Field,
    instant: Instant,
    clock: Clock | None = None,
    context: CalendarContext | None = None,
) -> bool:
    """True if `instant` lies in the current week, month, year, ..."""
    return is_same_period(granularity, instant, resolve_clock(clock).now(), context)


def _sign(a: Instant, b: Instant) -> int:
    return (a > b) - (a < b)


def is_between(
    instant: Instant,
    start: Instant,
    end: Instant,
    include_bounds: bool = False,
) -> bool:
    """True if `instant` lies between the two bounds, in either order."""
    product = _sign(start, instant) * _sign(instant, end)
    if include_bounds:
        return product >= 0
    return product > 0


def is_within(
    instant: Instant,
    value: int,
    field: Field,
    other: Instant,
    context: CalendarContext | None = None,
) -> bool:
    """True if `other` is no more than `value` whole `field` units away."""
    count = difference(instant, other, (field,), context)[field]
    return abs(count) <= value


def random_between(
    start: Instant,
    end: Instant,
    include_end: bool = False,
    rng: random.Random | None = None,
) -> Instant:
    """Uniformly random Instant in [start, end) or [start, end]."""
    if end < start or (end == start and not include_end):
        raise ValueError("Empty range: end must follow start")
    rng = rng or random.Random()
    pick = rng.randint if include_end else rng.randrange
    return Instant(pick(start.nanoseconds, end.nanoseconds))

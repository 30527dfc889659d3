"""Field Mutator: write one calendar field, validated against its parent unit."""

from __future__ import annotations

import logging
from datetime import MAXYEAR

from calendar_fields.context import CalendarContext, resolve
from calendar_fields.fields import days_in_month, get
from calendar_fields.types import (
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    Field,
    Instant,
)
from calendar_fields.units import shift

logger = logging.getLogger(__name__)

_FIXED_RANGES: dict[Field, range] = {
    Field.MONTH: range(1, 13),
    Field.HOUR: range(0, 24),
    Field.MINUTE: range(0, 60),
    Field.SECOND: range(0, 60),
    Field.MILLISECOND: range(0, 1000),
    Field.NANOSECOND: range(0, NANOS_PER_SECOND),
}

# Coarsest first, so a day write sees the month it will land in.
WRITE_ORDER: tuple[Field, ...] = (
    Field.YEAR,
    Field.MONTH,
    Field.DAY,
    Field.HOUR,
    Field.MINUTE,
    Field.SECOND,
    Field.MILLISECOND,
    Field.NANOSECOND,
)


def legal_range(
    field: Field, instant: Instant, context: CalendarContext | None = None
) -> range | None:
    """Legal values of `field` within its parent unit, as `instant` stands now.

    The day range comes from the instant's current year and month, not from
    any month a later write might move it to. Read-only fields return None.
    """
    if field is Field.YEAR:
        return range(1, MAXYEAR + 1)
    if field is Field.DAY:
        local = resolve(context).to_local(instant)
        return range(1, days_in_month(local.year, local.month) + 1)
    return _FIXED_RANGES.get(field)


def set_field(
    field: Field,
    instant: Instant,
    value: int,
    context: CalendarContext | None = None,
) -> Instant | None:
    """Return `instant` with `field` set to `value`, or None if rejected.

    The result is `instant` shifted by (value - current) whole units of
    `field`. Coarser fields stay put; finer fields carry through the shift
    (a month write on Jan 31 clamps the day). Rejected when `value` is
    outside legal_range(), when the field is read-only (era, quarter,
    weekday, week numbers) or when the result leaves years 1-9999.
    """
    context = resolve(context)
    allowed = legal_range(field, instant, context)
    if allowed is None:
        logger.debug("Rejected write to read-only field %s", field.value)
        return None

    # Years have no upper bound of their own; overflow is caught below.
    ok = value > 0 if field is Field.YEAR else value in allowed
    if not ok:
        logger.debug(
            "Rejected %s=%d: outside %d..%d",
            field.value, value, allowed.start, allowed.stop - 1,
        )
        return None

    if field is Field.MILLISECOND:
        field, value = Field.NANOSECOND, value * NANOS_PER_MILLISECOND

    current = get(field, instant, context)
    try:
        return shift(instant, field, value - current, context)
    except OverflowError:
        logger.debug("Rejected %s=%d: result out of range", field.value, value)
        return None


def with_fields(
    instant: Instant,
    context: CalendarContext | None = None,
    **values: int,
) -> Instant | None:
    """Apply several field writes, coarsest first.

    Keywords are field names (year, month, day, hour, minute, second,
    millisecond, nanosecond). Returns None at the first rejected write.
    """
    context = resolve(context)
    requested: dict[Field, int] = {}
    for name, value in values.items():
        try:
            field = Field(name)
        except ValueError:
            raise TypeError(f"Unknown field keyword: {name!r}") from None
        if field not in WRITE_ORDER:
            raise TypeError(f"Field {name!r} cannot be written")
        requested[field] = value

    result: Instant | None = instant
    for field in WRITE_ORDER:
        if field in requested:
            result = set_field(field, result, requested[field], context)
            if result is None:
                return None
    return result

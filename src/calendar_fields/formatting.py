"""Conversions between Instants, epoch timestamps and formatted strings."""

from __future__ import annotations

from datetime import datetime

from calendar_fields.clock import Clock, resolve_clock
from calendar_fields.context import CalendarContext, resolve
from calendar_fields.fields import get
from calendar_fields.names import NameStyle, month_names, weekday_names
from calendar_fields.types import (
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    DateParseError,
    Field,
    Instant,
    trunc_div,
)

DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S"
ISO_PATTERN = "%Y-%m-%dT%H:%M:%S.%f%z"

SECONDS_DIGITS = 10
MILLIS_DIGITS = 13

# Coarse units for relative descriptions: 30-day months, 360-day years.
_RELATIVE_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 31_104_000),
    ("month", 2_592_000),
    ("day", 86_400),
    ("hour", 3600),
    ("minute", 60),
)


# ----------------------------------------------------------------------
# Epoch timestamps
# ----------------------------------------------------------------------

def timestamp(instant: Instant, unix: bool = True) -> int:
    """Seconds (unix=True) or milliseconds since the epoch, truncated toward zero."""
    scale = NANOS_PER_SECOND if unix else NANOS_PER_MILLISECOND
    return trunc_div(instant.nanoseconds, scale)


def timestamp_string(instant: Instant, unix: bool = True) -> str:
    """Epoch timestamp as digits: seconds truncated, milliseconds rounded."""
    if unix:
        return str(timestamp(instant, unix=True))
    q, r = divmod(abs(instant.nanoseconds), NANOS_PER_MILLISECOND)
    if 2 * r >= NANOS_PER_MILLISECOND:
        q += 1
    return str(q if instant.nanoseconds >= 0 else -q)


def instant_from_timestamp_string(text: str) -> Instant:
    """Instant from a 10-digit (seconds) or 13-digit (milliseconds) string.

    The sub-second part of a millisecond stamp is dropped. Any other
    length or a non-digit character raises DateParseError.
    """
    if len(text) not in (SECONDS_DIGITS, MILLIS_DIGITS):
        raise DateParseError(
            text,
            f"timestamp must have {SECONDS_DIGITS} or {MILLIS_DIGITS} digits, "
            f"got {len(text)}",
        )
    if not (text.isascii() and text.isdigit()):
        raise DateParseError(text, "timestamp must contain only digits")

    value = int(text)
    if len(text) == MILLIS_DIGITS:
        value //= 1000
    return Instant.from_timestamp(value)


def timestamp_as_date_string(
    text: str,
    fmt: str = DEFAULT_FORMAT,
    context: CalendarContext | None = None,
) -> str:
    return format_instant(instant_from_timestamp_string(text), fmt, context)


# ----------------------------------------------------------------------
# Pattern formatting and parsing
# ----------------------------------------------------------------------

def format_instant(
    instant: Instant,
    fmt: str = DEFAULT_FORMAT,
    context: CalendarContext | None = None,
    gmt: bool = False,
) -> str:
    """Render with a strftime pattern in the context's zone (or GMT)."""
    if gmt:
        return instant.to_datetime().strftime(fmt)
    return resolve(context).to_local(instant).strftime(fmt)


def iso8601(instant: Instant) -> str:
    """Fixed ISO 8601 form in GMT: YYYY-MM-DDTHH:MM:SS.mmmZ."""
    utc = instant.to_datetime()
    millis = instant.subsecond_nanos // NANOS_PER_MILLISECOND
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}.{millis:03d}Z"
    )


def parse_instant(
    text: str,
    fmt: str = ISO_PATTERN,
    context: CalendarContext | None = None,
) -> Instant:
    """Parse with a strptime pattern.

    Text without an offset is read as wall time in the context's zone.
    Raises DateParseError when the text does not match the pattern.
    """
    try:
        dt = datetime.strptime(text, fmt)
    except ValueError as e:
        raise DateParseError(text, str(e)) from e
    return resolve(context).from_local(dt)


# ----------------------------------------------------------------------
# Names
# ----------------------------------------------------------------------

def month_name(
    instant: Instant,
    style: NameStyle = NameStyle.FULL,
    context: CalendarContext | None = None,
) -> str:
    context = resolve(context)
    month = get(Field.MONTH, instant, context)
    return month_names(context.locale, style)[month - 1]


def day_name(
    instant: Instant,
    style: NameStyle = NameStyle.FULL,
    context: CalendarContext | None = None,
) -> str:
    context = resolve(context)
    weekday = get(Field.WEEKDAY, instant, context)
    return weekday_names(context.locale, style)[weekday - 1]


def relative_description(instant: Instant, clock: Clock | None = None) -> str:
    """Coarse English distance from now: "3 hours ago", "in 2 days"."""
    now = resolve_clock(clock).now()
    seconds = (now.nanoseconds - instant.nanoseconds) / NANOS_PER_SECOND
    past = seconds > 0
    magnitude = abs(seconds)

    for unit, size in _RELATIVE_UNITS:
        if magnitude >= size:
            count = int(magnitude // size)
            label = unit if count == 1 else f"{unit}s"
            return f"{count} {label} ago" if past else f"in {count} {label}"
    return "just now" if past else "in a moment"

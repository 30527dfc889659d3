"""calendar-fields: Calendar-aware field access, mutation and period boundaries."""

from calendar_fields.arithmetic import (
    add,
    difference,
    elapsed_seconds,
    nearest_minute_grid,
)
from calendar_fields.boundaries import beginning_of, end_of, period
from calendar_fields.clock import Clock, FixedClock, SystemClock
from calendar_fields.context import CalendarContext
from calendar_fields.fields import days_in_month, get, is_leap_year, quarter
from calendar_fields.formatting import (
    format_instant,
    instant_from_timestamp_string,
    iso8601,
    parse_instant,
    timestamp,
)
from calendar_fields.mutation import legal_range, set_field, with_fields
from calendar_fields.names import NameStyle
from calendar_fields.types import DateParseError, Field, Instant

__all__ = [
    "CalendarContext",
    "Clock",
    "DateParseError",
    "Field",
    "FixedClock",
    "Instant",
    "NameStyle",
    "SystemClock",
    "add",
    "beginning_of",
    "days_in_month",
    "difference",
    "elapsed_seconds",
    "end_of",
    "format_instant",
    "get",
    "instant_from_timestamp_string",
    "is_leap_year",
    "iso8601",
    "legal_range",
    "nearest_minute_grid",
    "parse_instant",
    "period",
    "quarter",
    "set_field",
    "timestamp",
    "with_fields",
]

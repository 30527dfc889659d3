"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from datetime import date, timedelta

from calendar_fields.context import CalendarContext
from calendar_fields.fields import components, days_in_month, week_of_month, week_start
from calendar_fields.names import NameStyle, weekday_names
from calendar_fields.types import Field, Instant


def show_month(instant: Instant, context: CalendarContext) -> str:
    """Print an ASCII month grid for the month containing `instant`.

    Rows are weeks, labelled with their week-of-month number (0 for a
    leading partial week that does not count as week 1). Columns start at
    the context's first weekday. The instant's day is marked with '*'.
    Returns the string and also prints to stdout.
    """
    local = context.to_local(instant)
    first = date(local.year, local.month, 1)
    last = first.replace(day=days_in_month(local.year, local.month))

    abbrevs = weekday_names(context.locale, NameStyle.ABBREVIATED)
    order = [(context.first_weekday - 1 + i) % 7 for i in range(7)]

    lines: list[str] = []
    lines.append(f"{local.year:04d}-{local.month:02d}")
    lines.append("  wk  " + " ".join(f"{abbrevs[i]:>4s}" for i in order))

    row_start = week_start(first, context)
    while row_start <= last:
        cells = []
        for offset in range(7):
            d = row_start + timedelta(days=offset)
            if d.month != local.month:
                cells.append("    ")
            else:
                mark = "*" if d == local.date() else " "
                cells.append(f"{d.day:>3d}{mark}")
        in_month = max(row_start, first)
        label = week_of_month(in_month, context)
        lines.append(f"  {label:>2d}  " + " ".join(cells))
        row_start += timedelta(days=7)

    result = "\n".join(lines)
    print(result)
    return result


def show_components(instant: Instant, context: CalendarContext) -> str:
    """Print every field of `instant` as a two-column table.

    Returns the string and also prints to stdout.
    """
    values = components(instant, context)
    width = max(len(f.value) for f in Field)
    lines = [f"{f.value:<{width}s}  {values[f]}" for f in Field]
    result = "\n".join(lines)
    print(result)
    return result

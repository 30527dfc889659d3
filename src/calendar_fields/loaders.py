"""Data loading utilities for calendar context definitions."""

from __future__ import annotations

import json
from pathlib import Path

from calendar_fields.context import CalendarContext, parse_timezone
from calendar_fields.schema import validate_context


def context_from_mapping(data: dict, source: str = "mapping") -> CalendarContext:
    """Build a CalendarContext from a plain dict.

    Missing keys take the CalendarContext defaults, except timezone which
    defaults to "local" (the host zone).

    Raises ValueError listing every validation error.
    """
    errors = validate_context(data)
    if errors:
        raise ValueError(
            f"Validation errors in {source}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    kwargs = {
        "tz": parse_timezone(data.get("timezone", "local")),
    }
    for key in ("first_weekday", "min_days_in_first_week", "locale"):
        if key in data:
            kwargs[key] = data[key]
    return CalendarContext(**kwargs)


def load_context_json(path: str | Path) -> CalendarContext:
    """Load a CalendarContext from a JSON file.

    Either a bare context object or a wrapped one:
    {
        "id": "...",
        "context": {
            "timezone": "Asia/Shanghai",
            "first_weekday": 2,
            "min_days_in_first_week": 4,
            "locale": "zh_CN"
        }
    }

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    ctx_data = data.get("context", data)
    return context_from_mapping(ctx_data, source=path.name)


def load_contexts_json(path: str | Path) -> dict[str, CalendarContext]:
    """Load several named contexts from one JSON file.

    {
        "contexts": {
            "utc": { "timezone": "UTC" },
            ...
        }
    }
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    contexts: dict[str, CalendarContext] = {}
    for name, ctx_data in data["contexts"].items():
        contexts[name] = context_from_mapping(ctx_data, source=f"{name} in {path.name}")
    return contexts

"""Input validation for calendar context definitions."""

from __future__ import annotations

import re

from calendar_fields.context import parse_timezone

_LOCALE_RE = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})*$")

KNOWN_KEYS = frozenset({
    "timezone",
    "first_weekday",
    "min_days_in_first_week",
    "locale",
})


def _check_day_count(data: dict, key: str, errors: list[str]) -> None:
    if key not in data:
        return
    value = data[key]
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        errors.append(f"'{key}' must be an integer, got {value!r}")
    elif not 1 <= value <= 7:
        errors.append(f"'{key}' must be 1-7, got {value}")


def validate_context(data: dict) -> list[str]:
    """Validate a context definition. Returns list of error messages (empty = valid).

    Checks:
    - No unknown keys
    - timezone resolves (IANA key, "local", "UTC" or a "+HH:MM" offset)
    - first_weekday and min_days_in_first_week are integers 1-7
    - locale looks like a language tag ("en_US", "zh-CN")
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        return [f"context must be an object, got {type(data).__name__}"]

    for key in sorted(set(data) - KNOWN_KEYS):
        errors.append(f"Unknown key: {key!r}")

    if "timezone" in data:
        tz_name = data["timezone"]
        if not isinstance(tz_name, str):
            errors.append(f"'timezone' must be a string, got {tz_name!r}")
        else:
            try:
                parse_timezone(tz_name)
            except ValueError as e:
                errors.append(f"Invalid timezone - {e}")

    _check_day_count(data, "first_weekday", errors)
    _check_day_count(data, "min_days_in_first_week", errors)

    if "locale" in data:
        locale = data["locale"]
        if not isinstance(locale, str) or not _LOCALE_RE.match(locale):
            errors.append(f"Invalid locale: {locale!r}")

    return errors

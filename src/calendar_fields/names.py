"""Month and weekday name tables keyed by language.

Weekday tuples are Sunday-first so WEEKDAY values (1 = Sunday) index them
directly after subtracting one.
"""

from __future__ import annotations

from enum import Enum


class NameStyle(Enum):
    FULL = "full"
    ABBREVIATED = "abbreviated"  # three letters in English
    NARROW = "narrow"  # one letter


DEFAULT_LANGUAGE = "en"

_EN_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_EN_WEEKDAYS = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_ZH_NUMERALS = ("一", "二", "三", "四", "五", "六", "七", "八", "九", "十", "十一", "十二")
_ZH_WEEKDAYS = ("日", "一", "二", "三", "四", "五", "六")

MONTH_NAMES: dict[str, dict[NameStyle, tuple[str, ...]]] = {
    "en": {
        NameStyle.FULL: _EN_MONTHS,
        NameStyle.ABBREVIATED: tuple(m[:3] for m in _EN_MONTHS),
        NameStyle.NARROW: tuple(m[0] for m in _EN_MONTHS),
    },
    "zh": {
        NameStyle.FULL: tuple(f"{n}月" for n in _ZH_NUMERALS),
        NameStyle.ABBREVIATED: tuple(f"{i}月" for i in range(1, 13)),
        NameStyle.NARROW: tuple(str(i) for i in range(1, 13)),
    },
}

WEEKDAY_NAMES: dict[str, dict[NameStyle, tuple[str, ...]]] = {
    "en": {
        NameStyle.FULL: _EN_WEEKDAYS,
        NameStyle.ABBREVIATED: tuple(d[:3] for d in _EN_WEEKDAYS),
        NameStyle.NARROW: tuple(d[0] for d in _EN_WEEKDAYS),
    },
    "zh": {
        NameStyle.FULL: tuple(f"星期{d}" for d in _ZH_WEEKDAYS),
        NameStyle.ABBREVIATED: tuple(f"周{d}" for d in _ZH_WEEKDAYS),
        NameStyle.NARROW: _ZH_WEEKDAYS,
    },
}


def language(locale: str) -> str:
    """Language part of a locale tag: "zh_CN" / "zh-Hans-CN" -> "zh"."""
    return locale.replace("-", "_").split("_")[0].lower()


def month_names(locale: str, style: NameStyle = NameStyle.FULL) -> tuple[str, ...]:
    table = MONTH_NAMES.get(language(locale), MONTH_NAMES[DEFAULT_LANGUAGE])
    return table[style]


def weekday_names(locale: str, style: NameStyle = NameStyle.FULL) -> tuple[str, ...]:
    table = WEEKDAY_NAMES.get(language(locale), WEEKDAY_NAMES[DEFAULT_LANGUAGE])
    return table[style]

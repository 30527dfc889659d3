"""Tests for Instant, Field and DateParseError."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from calendar_fields.types import (
    NANOS_PER_SECOND,
    DateParseError,
    Field,
    Instant,
    trunc_div,
)
from conftest import at


class TestInstant:

    def test_epoch(self):
        assert Instant(0).to_datetime() == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_from_datetime_converts_offset(self):
        local = datetime(2024, 1, 1, 8, 0, tzinfo=timezone(timedelta(hours=8)))
        assert Instant.from_datetime(local) == at("2024-01-01T00:00:00Z")

    def test_from_datetime_rejects_naive(self):
        with pytest.raises(TypeError, match="timezone-aware"):
            Instant.from_datetime(datetime(2024, 1, 1))

    def test_microseconds_are_exact(self):
        instant = Instant.from_datetime(datetime(2024, 1, 1, 0, 0, 0, 1, tzinfo=timezone.utc))
        assert instant.subsecond_nanos == 1_000

    def test_ordering(self):
        earlier = at("2024-01-01T00:00:00Z")
        later = at("2024-01-01T00:00:01Z")
        assert earlier < later
        assert max(later, earlier) is later
        assert sorted([later, earlier]) == [earlier, later]

    def test_add_timedelta(self):
        instant = at("2024-01-01T00:00:00Z")
        assert instant + timedelta(days=1) == at("2024-01-02T00:00:00Z")
        assert instant - timedelta(seconds=1) == at("2023-12-31T23:59:59Z")

    def test_subtract_instants(self):
        assert at("2024-01-02T00:00:00Z") - at("2024-01-01T00:00:00Z") == timedelta(days=1)

    def test_add_rejects_other_types(self):
        with pytest.raises(TypeError):
            at("2024-01-01T00:00:00Z") + 5

    def test_before_epoch(self):
        instant = Instant(-1)
        assert instant.subsecond_nanos == NANOS_PER_SECOND - 1
        assert instant.to_datetime() == datetime(1969, 12, 31, 23, 59, 59, 999_999, tzinfo=timezone.utc)

    def test_seconds(self):
        assert Instant(1_500_000_000).seconds == 1.5

    def test_repr(self):
        assert repr(Instant(42)) == "Instant(42ns)"

    def test_hashable(self):
        assert len({Instant(1), Instant(1), Instant(2)}) == 2

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Instant(0).nanoseconds = 1


class TestField:

    @pytest.mark.parametrize(
        "field, parent",
        [
            (Field.ERA, None),
            (Field.YEAR, None),
            (Field.MONTH, Field.YEAR),
            (Field.WEEK_OF_MONTH, Field.MONTH),
            (Field.DAY, Field.MONTH),
            (Field.HOUR, Field.DAY),
            (Field.MILLISECOND, Field.SECOND),
            (Field.NANOSECOND, Field.SECOND),
        ],
    )
    def test_parent(self, field, parent):
        assert field.parent is parent

    def test_week_fields(self):
        weeks = [f for f in Field if f.is_week]
        assert weeks == [Field.WEEK_OF_YEAR, Field.WEEK_OF_MONTH]

    def test_lookup_by_name(self):
        assert Field("week_of_month") is Field.WEEK_OF_MONTH


class TestHelpers:

    @pytest.mark.parametrize(
        "numerator, denominator, expected",
        [(7, 2, 3), (-7, 2, -3), (0, 5, 0), (-1, 1000, 0)],
    )
    def test_trunc_div(self, numerator, denominator, expected):
        assert trunc_div(numerator, denominator) == expected


class TestDateParseError:

    def test_carries_text_and_reason(self):
        err = DateParseError("2024-13-01", "month out of range")
        assert isinstance(err, ValueError)
        assert err.text == "2024-13-01"
        assert err.reason == "month out of range"
        assert "2024-13-01" in str(err)

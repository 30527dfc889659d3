"""Tests for the field mutator: legal_range, set_field, with_fields.

Test data loaded from: data/fixtures/scenarios/mutation.json
"""

from __future__ import annotations

import logging

import pytest

from calendar_fields.fields import get
from calendar_fields.mutation import legal_range, set_field, with_fields
from calendar_fields.types import Field, Instant
from conftest import at, at_or_none, load_scenarios, make_context

_data = load_scenarios("mutation")


class TestSetField:

    @pytest.mark.parametrize("spec", _data["set_field"], ids=lambda s: s["id"])
    def test_set_field(self, spec):
        ctx = make_context(spec["context"])
        instant = at(spec["instant"])
        result = set_field(Field(spec["field"]), instant, spec["value"], ctx)
        assert result == at_or_none(spec["expected"]), spec["notes"]

    def test_rejection_leaves_instant_unchanged(self, utc):
        instant = at("2024-04-15T10:20:30Z")
        before = instant.nanoseconds
        assert set_field(Field.DAY, instant, 31, utc) is None
        assert instant.nanoseconds == before

    def test_rejection_is_logged(self, utc, caplog):
        with caplog.at_level(logging.DEBUG, logger="calendar_fields.mutation"):
            set_field(Field.HOUR, at("2024-04-15T10:20:30Z"), 24, utc)
        assert "Rejected hour=24" in caplog.text

    def test_nanosecond_write_is_exact(self, utc):
        result = set_field(Field.NANOSECOND, at("2024-04-15T10:20:30Z"), 987_654_321, utc)
        assert get(Field.NANOSECOND, result, utc) == 987_654_321
        assert get(Field.SECOND, result, utc) == 30

    def test_millisecond_replaces_finer_digits(self, utc):
        base = Instant(at("2024-04-15T10:20:30Z").nanoseconds + 123_456_789)
        result = set_field(Field.MILLISECOND, base, 5, utc)
        assert get(Field.NANOSECOND, result, utc) == 5_000_000

    def test_coarser_fields_unchanged(self, utc):
        result = set_field(Field.MINUTE, at("2024-04-15T10:59:30Z"), 0, utc)
        assert (get(Field.DAY, result, utc), get(Field.HOUR, result, utc)) == (15, 10)

    @pytest.mark.parametrize("field", [Field.YEAR, Field.MONTH, Field.DAY, Field.HOUR])
    def test_rewriting_current_value_across_fall_back(self, new_york, field):
        """Both passes through 01:xx on 2024-11-03 survive a no-op write."""
        start = at("2024-11-03T04:00:00Z")
        for step in range(17):
            instant = Instant(start.nanoseconds + step * 15 * 60 * 1_000_000_000)
            current = get(field, instant, new_york)
            assert set_field(field, instant, current, new_york) == instant

    def test_write_order_matters(self, utc):
        """Day 31 is checked against the month the instant is in now."""
        april = at("2024-04-15T00:00:00Z")
        assert set_field(Field.DAY, april, 31, utc) is None
        may = set_field(Field.MONTH, april, 5, utc)
        assert set_field(Field.DAY, may, 31, utc) == at("2024-05-31T00:00:00Z")


class TestLegalRange:

    def test_day_range_tracks_month(self, utc):
        assert legal_range(Field.DAY, at("2024-02-10T00:00:00Z"), utc) == range(1, 30)
        assert legal_range(Field.DAY, at("2023-02-10T00:00:00Z"), utc) == range(1, 29)
        assert legal_range(Field.DAY, at("2023-04-10T00:00:00Z"), utc) == range(1, 31)

    @pytest.mark.parametrize(
        "field, expected",
        [
            (Field.MONTH, range(1, 13)),
            (Field.HOUR, range(0, 24)),
            (Field.MINUTE, range(0, 60)),
            (Field.SECOND, range(0, 60)),
            (Field.MILLISECOND, range(0, 1000)),
            (Field.NANOSECOND, range(0, 1_000_000_000)),
        ],
    )
    def test_fixed_ranges(self, utc, field, expected):
        assert legal_range(field, at("2024-02-10T00:00:00Z"), utc) == expected

    @pytest.mark.parametrize(
        "field", [Field.ERA, Field.QUARTER, Field.WEEKDAY, Field.WEEK_OF_YEAR, Field.WEEK_OF_MONTH]
    )
    def test_read_only_fields(self, utc, field):
        assert legal_range(field, at("2024-02-10T00:00:00Z"), utc) is None


class TestWithFields:

    def test_coarsest_first(self, utc):
        """month=5 is applied before day=31 regardless of keyword order."""
        result = with_fields(at("2024-04-15T10:20:30Z"), utc, day=31, month=5)
        assert result == at("2024-05-31T10:20:30Z")

    def test_full_wall_clock(self, utc):
        result = with_fields(
            at("2024-04-15T10:20:30.500Z"), utc,
            year=2023, month=2, day=28, hour=7, minute=5, second=0, millisecond=0,
        )
        assert result == at("2023-02-28T07:05:00Z")

    def test_first_rejection_wins(self, utc):
        assert with_fields(at("2024-04-15T10:20:30Z"), utc, month=2, day=30) is None

    def test_unknown_keyword(self, utc):
        with pytest.raises(TypeError, match="Unknown field keyword"):
            with_fields(at("2024-04-15T10:20:30Z"), utc, fortnight=2)

    def test_read_only_keyword(self, utc):
        with pytest.raises(TypeError, match="cannot be written"):
            with_fields(at("2024-04-15T10:20:30Z"), utc, weekday=2)

"""Tests for the ASCII month grid and field table."""

from __future__ import annotations

from calendar_fields.debug import show_components, show_month
from calendar_fields.types import Field
from conftest import at


class TestShowMonth:

    def test_sunday_first_grid(self, utc, capsys):
        text = show_month(at("2024-02-29T12:00:00Z"), utc)
        lines = text.splitlines()
        assert lines[0] == "2024-02"
        assert lines[1].split()[1:3] == ["Sun", "Mon"]
        # Jan 28 - Mar 2 spans five Sunday-first rows
        assert len(lines) == 7
        assert lines[2].split()[0] == "1"
        assert " 29*" in lines[-1]
        assert capsys.readouterr().out == text + "\n"

    def test_leading_partial_week_labelled_zero(self, iso_utc):
        # March 2024 starts on a Friday: three days do not make an ISO week 1
        lines = show_month(at("2024-03-15T00:00:00Z"), iso_utc).splitlines()
        assert lines[1].split()[1] == "Mon"
        assert lines[2].split()[:2] == ["0", "1"]
        assert lines[3].split()[0] == "1"
        assert " 15*" in lines[4]

    def test_uses_context_locale(self, shanghai):
        text = show_month(at("2024-02-10T00:00:00Z"), shanghai)
        assert "周日" in text.splitlines()[1]


class TestShowComponents:

    def test_lists_every_field(self, utc, capsys):
        text = show_components(at("2024-02-29T13:45:30.250Z"), utc)
        lines = text.splitlines()
        assert len(lines) == len(Field)
        rows = dict(line.split() for line in lines)
        assert rows["year"] == "2024"
        assert rows["weekday"] == "5"
        assert rows["millisecond"] == "250"
        assert capsys.readouterr().out == text + "\n"

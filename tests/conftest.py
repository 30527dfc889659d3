"""Shared test fixtures and data loading for calendar-fields.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Instants in fixtures are written as ISO 8601 UTC strings with a trailing
'Z' ("2024-02-29T13:45:30.250Z").
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def at(iso: str):
    """Instant from an ISO string; 'Z' or no offset means UTC.

    >>> at("1970-01-01T00:00:01Z").nanoseconds
    1000000000
    """
    from calendar_fields.types import Instant

    if iso.endswith("Z"):
        iso = iso[:-1] + "+00:00"
    dt = datetime.fromisoformat(iso)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return Instant.from_datetime(dt)


def at_or_none(iso: str | None):
    return None if iso is None else at(iso)


# ---------------------------------------------------------------------------
# Context factory
# ---------------------------------------------------------------------------
def make_context(name: str):
    """Build a CalendarContext from contexts.json by name."""
    from calendar_fields.loaders import load_contexts_json

    return load_contexts_json(FIXTURES_DIR / "contexts.json")[name]


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def utc():
    return make_context("utc")


@pytest.fixture
def shanghai():
    """UTC+8 fixed offset, Chinese names."""
    return make_context("shanghai")


@pytest.fixture
def iso_utc():
    """Monday-first weeks, ISO 8601 week numbering."""
    return make_context("iso_utc")


@pytest.fixture
def new_york():
    """IANA zone with daylight saving."""
    return make_context("new_york")


@pytest.fixture
def fixed_clock():
    """Clock frozen at Wed 2024-05-15 12:00:00 UTC."""
    from calendar_fields.clock import FixedClock

    return FixedClock(at("2024-05-15T12:00:00Z"))

#!/usr/bin/env python
"""Visual verification report for calendar-fields.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. Calendar contexts (zone, week conventions, locale, ASCII month grid)
  2. Field access  -- every field of each scenario instant
  3. Field mutation  -- accepted and rejected writes
  4. Period boundaries  -- beginning/end pairs per granularity
  5. Rounding and differences  -- input/output tables
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from calendar_fields.arithmetic import difference, nearest_minute_grid
from calendar_fields.boundaries import beginning_of, end_of
from calendar_fields.debug import show_month
from calendar_fields.fields import get
from calendar_fields.formatting import iso8601
from calendar_fields.loaders import load_contexts_json
from calendar_fields.mutation import legal_range, set_field
from calendar_fields.types import Field, Instant


def _load(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


_contexts = load_contexts_json(FIXTURES / "contexts.json")
_raw_contexts = _load(FIXTURES / "contexts.json")["contexts"]

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _at(iso: str) -> Instant:
    if iso.endswith("Z"):
        iso = iso[:-1] + "+00:00"
    return Instant.from_datetime(datetime.fromisoformat(iso))


def _fmt(instant) -> str:
    return "None" if instant is None else iso8601(instant)


def _mark(ok: bool) -> str:
    return "ok" if ok else "MISMATCH"


# ---------------------------------------------------------------------------
# Section 1: Contexts
# ---------------------------------------------------------------------------
def section_contexts():
    banner("CALENDAR CONTEXTS")

    rows = []
    for name, raw in _raw_contexts.items():
        ctx = _contexts[name]
        rows.append([
            name,
            raw.get("timezone", "local"),
            str(ctx.first_weekday),
            str(ctx.min_days_in_first_week),
            ctx.locale,
        ])
    table(["Name", "Timezone", "First weekday", "Min days wk 1", "Locale"], rows)

    for name in ("utc", "iso_utc", "shanghai"):
        heading(f"Month grid: {name}, March 2024")
        show_month(_at("2024-03-15T12:00:00Z"), _contexts[name])


# ---------------------------------------------------------------------------
# Section 2: Field access
# ---------------------------------------------------------------------------
def section_field_access():
    banner("FIELD ACCESS")

    data = _load(SCENARIOS / "field_access.json")
    for s in data["get"]:
        ctx = _contexts[s["context"]]
        instant = _at(s["instant"])
        heading(f"{s['id']}  ({s['context']}, {s['instant']})")
        rows = []
        for key, expected in s["expected"].items():
            actual = get(Field(key), instant, ctx)
            rows.append([key, str(expected), str(actual), _mark(actual == expected)])
        table(["Field", "Expected", "Actual", ""], rows)


# ---------------------------------------------------------------------------
# Section 3: Mutation
# ---------------------------------------------------------------------------
def section_mutation():
    banner("FIELD MUTATION")

    data = _load(SCENARIOS / "mutation.json")
    heading("Function: set_field(field, instant, value) -> Instant | None")
    print("    Writes outside the field's legal range return None.\n")
    rows = []
    for s in data["set_field"]:
        ctx = _contexts[s["context"]]
        instant = _at(s["instant"])
        field = Field(s["field"])
        allowed = legal_range(field, instant, ctx)
        span = "read-only" if allowed is None else f"{allowed.start}..{allowed.stop - 1}"
        result = set_field(field, instant, s["value"], ctx)
        expected = None if s["expected"] is None else _at(s["expected"])
        rows.append([
            s["id"], s["field"], str(s["value"]), span,
            _fmt(result), _mark(result == expected),
        ])
    table(["Case", "Field", "Value", "Legal", "Result", ""], rows)


# ---------------------------------------------------------------------------
# Section 4: Boundaries
# ---------------------------------------------------------------------------
def section_boundaries():
    banner("PERIOD BOUNDARIES")

    data = _load(SCENARIOS / "boundaries.json")
    heading("Function: beginning_of / end_of (end is inclusive)")
    rows = []
    for s in data["periods"]:
        ctx = _contexts[s["context"]]
        instant = _at(s["instant"])
        granularity = Field(s["granularity"])
        start = beginning_of(granularity, instant, ctx)
        end = end_of(granularity, instant, ctx)
        ok = start == _at(s["beginning"]) and end == _at(s["end"])
        rows.append([s["id"], s["granularity"], _fmt(start), _fmt(end), _mark(ok)])
    table(["Case", "Granularity", "Beginning", "End", ""], rows)


# ---------------------------------------------------------------------------
# Section 5: Arithmetic
# ---------------------------------------------------------------------------
def section_arithmetic():
    banner("ROUNDING AND DIFFERENCES")

    utc = _contexts["utc"]

    heading("Function: nearest_minute_grid(instant, grid)")
    rows = []
    for s in _load(SCENARIOS / "rounding.json")["nearest_minute_grid"]:
        ctx = _contexts[s.get("context", "utc")]
        result = nearest_minute_grid(_at(s["instant"]), s["grid"], ctx)
        rows.append([
            s["id"], s["instant"], str(s["grid"]), _fmt(result),
            _mark(result == _at(s["expected"])),
        ])
    table(["Case", "Instant", "Grid", "Result", ""], rows)

    heading("Function: difference(start, end, units)")
    rows = []
    for s in _load(SCENARIOS / "difference.json")["difference"]:
        units = [Field(u) for u in s["units"]]
        result = difference(_at(s["start"]), _at(s["end"]), units, utc)
        shown = ", ".join(f"{f.value}={n}" for f, n in result.items())
        expected = {Field(k): v for k, v in s["expected"].items()}
        rows.append([s["id"], shown, _mark(result == expected)])
    table(["Case", "Result", ""], rows)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    banner("CALENDAR-FIELDS   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_contexts()
    section_field_access()
    section_mutation()
    section_boundaries()
    section_arithmetic()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()

"""Current-instant sources. Inject a FixedClock for deterministic tests."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol

from calendar_fields.types import Instant


class Clock(Protocol):
    def now(self) -> Instant:
        """Current instant."""
        ...


class SystemClock:
    """Wall clock of the host."""

    def now(self) -> Instant:
        return Instant(time.time_ns())


@dataclass
class FixedClock:
    """Clock frozen at `current` until moved with advance()."""

    current: Instant

    def now(self) -> Instant:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta


def resolve_clock(clock: Clock | None) -> Clock:
    if clock is None:
        return SystemClock()
    return clock

"""Clock capability for reading the current time."""

from __future__ import annotations

import datetime
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current instant."""

    def now(self) -> datetime.datetime: ...


class SystemClock:
    """Reads the local wall-clock time."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now()


class FixedClock:
    """Always reports the same instant. Useful in tests."""

    def __init__(self, instant: datetime.datetime | datetime.date) -> None:
        if not isinstance(instant, datetime.datetime):
            instant = datetime.datetime.combine(instant, datetime.time())
        self.instant = instant

    def now(self) -> datetime.datetime:
        return self.instant


def get_current_year(clock: Clock | None = None) -> int:
    """Return the year of *clock*'s current instant (system clock by default)."""
    return (clock or SystemClock()).now().year

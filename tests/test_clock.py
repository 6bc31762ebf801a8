from __future__ import annotations

import datetime

from datecal.clock import FixedClock, SystemClock, get_current_year


class TestGetCurrentYear:
    def test_fixed_clock(self) -> None:
        assert get_current_year(FixedClock(datetime.datetime(2025, 6, 15))) == 2025

    def test_different_fixed_clock(self) -> None:
        assert get_current_year(FixedClock(datetime.datetime(2000, 1, 1))) == 2000

    def test_fixed_clock_accepts_date(self) -> None:
        clock = FixedClock(datetime.date(1999, 12, 31))
        assert clock.now() == datetime.datetime(1999, 12, 31, 0, 0)
        assert get_current_year(clock) == 1999

    def test_defaults_to_system_clock(self) -> None:
        before = datetime.datetime.now().year
        year = get_current_year()
        after = datetime.datetime.now().year
        assert before <= year <= after

    def test_system_clock_returns_datetime(self) -> None:
        assert isinstance(SystemClock().now(), datetime.datetime)

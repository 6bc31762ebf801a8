from __future__ import annotations

import datetime

import pytest

from datecal.exceptions import InvalidDateError, UnknownCountryError
from datecal.holidays import (
    PRESETS,
    HolidayCalendar,
    gb_holidays,
    get_holidays,
    is_holiday,
    named_holidays,
    us_holidays,
)


class TestHolidayPresets:
    def test_us_holidays_2025(self) -> None:
        dates = [d for d, _ in us_holidays(2025)]
        assert dates == [
            datetime.date(2025, 1, 1),
            datetime.date(2025, 1, 20),
            datetime.date(2025, 2, 17),
            datetime.date(2025, 5, 26),
            datetime.date(2025, 6, 19),
            datetime.date(2025, 7, 4),
            datetime.date(2025, 9, 1),
            datetime.date(2025, 10, 13),
            datetime.date(2025, 11, 11),
            datetime.date(2025, 11, 27),
            datetime.date(2025, 12, 25),
        ]

    def test_us_holidays_sorted(self) -> None:
        for year in (2021, 2024, 2026):
            dates = [d for d, _ in us_holidays(year, observed=True)]
            assert dates == sorted(dates)

    def test_us_holidays_observed_saturday(self) -> None:
        # July 4, 2026 falls on Saturday -> observed Friday July 3
        dates = {d: n for d, n in us_holidays(2026, observed=True)}
        assert dates[datetime.date(2026, 7, 3)] == "Independence Day"

    def test_us_holidays_observed_sunday(self) -> None:
        # July 4, 2021 falls on Sunday -> observed Monday July 5
        dates = {d: n for d, n in us_holidays(2021, observed=True)}
        assert datetime.date(2021, 7, 5) in dates

    def test_us_new_year_observed_in_previous_year(self) -> None:
        # Jan 1, 2022 is a Saturday -> observed Friday Dec 31, 2021
        observed_2021 = dict(us_holidays(2021, observed=True))
        assert observed_2021[datetime.date(2021, 12, 31)] == "New Year's Day"
        assert observed_2021[datetime.date(2021, 1, 1)] == "New Year's Day"
        observed_2022 = [d for d, _ in us_holidays(2022, observed=True)]
        assert datetime.date(2022, 1, 1) not in observed_2022
        assert datetime.date(2022, 12, 26) in observed_2022
        assert len(observed_2022) == 10

    def test_gb_holidays_2025(self) -> None:
        assert dict(gb_holidays(2025)) == {
            datetime.date(2025, 1, 1): "New Year's Day",
            datetime.date(2025, 4, 18): "Good Friday",
            datetime.date(2025, 4, 21): "Easter Monday",
            datetime.date(2025, 5, 5): "Early May bank holiday",
            datetime.date(2025, 5, 26): "Spring bank holiday",
            datetime.date(2025, 8, 25): "Summer bank holiday",
            datetime.date(2025, 12, 25): "Christmas Day",
            datetime.date(2025, 12, 26): "Boxing Day",
        }

    def test_gb_easter_in_march(self) -> None:
        assert (datetime.date(2024, 3, 29), "Good Friday") in gb_holidays(2024)

    def test_gb_substitute_days(self) -> None:
        # 2021: Christmas Saturday, Boxing Day Sunday
        observed_2021 = dict(gb_holidays(2021, observed=True))
        assert observed_2021[datetime.date(2021, 12, 27)] == "Christmas Day"
        assert observed_2021[datetime.date(2021, 12, 28)] == "Boxing Day"
        # 2022: New Year Saturday, Christmas Sunday, Boxing Day Monday
        observed_2022 = dict(gb_holidays(2022, observed=True))
        assert observed_2022[datetime.date(2022, 1, 3)] == "New Year's Day"
        assert observed_2022[datetime.date(2022, 12, 26)] == "Boxing Day"
        assert observed_2022[datetime.date(2022, 12, 27)] == "Christmas Day"

    def test_named_holidays_unknown_country(self) -> None:
        with pytest.raises(KeyError):
            named_holidays("xx", 2025)
        with pytest.raises(UnknownCountryError, match="Supported: gb, us"):
            named_holidays("xx", 2025)

    def test_named_holidays_us(self) -> None:
        assert named_holidays("us", 2025) == us_holidays(2025)

    @pytest.mark.parametrize("year", [0, 10000, "2025", 2025.0, True])
    def test_invalid_year(self, year: object) -> None:
        with pytest.raises(InvalidDateError):
            named_holidays("us", year)  # type: ignore[arg-type]

    def test_presets_cover_rules(self) -> None:
        for country in PRESETS:
            assert named_holidays(country, 2025)


class TestGetHolidays:
    @pytest.mark.asyncio
    async def test_returns_dates(self) -> None:
        holidays = await get_holidays(2025)
        assert isinstance(holidays, list)
        assert len(holidays) > 0
        assert all(isinstance(d, datetime.date) for d in holidays)

    @pytest.mark.asyncio
    async def test_includes_new_year_and_christmas(self) -> None:
        holidays = await get_holidays(2025)
        assert datetime.date(2025, 1, 1) in holidays
        assert datetime.date(2025, 12, 25) in holidays

    @pytest.mark.asyncio
    @pytest.mark.parametrize("country", sorted(PRESETS))
    @pytest.mark.parametrize("observed", [False, True])
    async def test_all_dates_in_requested_year(self, country: str, observed: bool) -> None:
        for year in range(2015, 2035):
            holidays = await get_holidays(year, country, observed=observed)
            assert all(d.year == year for d in holidays)

    @pytest.mark.asyncio
    async def test_actual_dates_always_include_fixed_holidays(self) -> None:
        for year in (1999, 2000, 2022, 2030, 2100):
            holidays = await get_holidays(year)
            assert datetime.date(year, 1, 1) in holidays
            assert datetime.date(year, 12, 25) in holidays

    @pytest.mark.asyncio
    async def test_unknown_country(self) -> None:
        with pytest.raises(UnknownCountryError):
            await get_holidays(2025, "xx")


class TestIsHoliday:
    @pytest.mark.asyncio
    async def test_new_year(self) -> None:
        assert await is_holiday(datetime.date(2025, 1, 1)) is True

    @pytest.mark.asyncio
    async def test_christmas(self) -> None:
        assert await is_holiday(datetime.date(2025, 12, 25)) is True

    @pytest.mark.asyncio
    async def test_regular_day(self) -> None:
        assert await is_holiday(datetime.date(2025, 7, 15)) is False

    @pytest.mark.asyncio
    async def test_ignores_time_of_day(self) -> None:
        assert await is_holiday(datetime.datetime(2025, 12, 25, 18, 30)) is True

    @pytest.mark.asyncio
    async def test_accepts_string(self) -> None:
        assert await is_holiday("2025-07-04") is True

    @pytest.mark.asyncio
    async def test_observed_flag(self) -> None:
        assert await is_holiday(datetime.date(2021, 12, 31)) is False
        assert await is_holiday(datetime.date(2021, 12, 31), observed=True) is True

    @pytest.mark.asyncio
    async def test_invalid_date(self) -> None:
        with pytest.raises(InvalidDateError):
            await is_holiday("not-a-date")


class TestHolidayCalendar:
    def test_unknown_country_rejected_eagerly(self) -> None:
        with pytest.raises(UnknownCountryError):
            HolidayCalendar("zz")

    def test_repr(self) -> None:
        assert repr(HolidayCalendar("gb", observed=True)) == "HolidayCalendar(country='gb', observed=True)"

    @pytest.mark.asyncio
    async def test_calendar_methods(self) -> None:
        calendar = HolidayCalendar("gb")
        holidays = await calendar.get_holidays(2025)
        assert datetime.date(2025, 12, 26) in holidays
        assert await calendar.is_holiday(datetime.date(2025, 4, 21)) is True
        assert await calendar.is_holiday(datetime.date(2025, 7, 4)) is False

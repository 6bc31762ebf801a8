"""Built-in holiday presets for common countries.

Each preset computes the public holidays of a given year from calendar
rules (fixed dates, nth weekday of a month, Easter offsets).  By default
the *actual* dates are returned.  With ``observed=True`` holidays falling
on a weekend are moved to the country's observed weekday; an observed
date that lands in a neighbouring year belongs to that year (New Year's
Day 2022, a Saturday, is observed in the US on Friday 2021-12-31).
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable

from dateutil.easter import easter

from datecal.dates import DateLike, is_same_day, to_date
from datecal.exceptions import InvalidDateError, UnknownCountryError

logger = logging.getLogger(__name__)

NamedHoliday = tuple[datetime.date, str]

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _nth_weekday(year: int, month: int, weekday: int, n: int) -> datetime.date:
    """Return the *n*-th occurrence of *weekday* in *month* of *year*.

    *weekday* follows ``datetime`` convention: 0 = Monday … 6 = Sunday.
    *n* is 1-based (1 = first, 2 = second, …).
    """
    first = datetime.date(year, month, 1)
    delta = (weekday - first.weekday()) % 7
    return first + datetime.timedelta(days=delta, weeks=n - 1)


def _last_weekday(year: int, month: int, weekday: int) -> datetime.date:
    """Return the last occurrence of *weekday* in *month* of *year*."""
    if month == 12:
        last = datetime.date(year, 12, 31)
    else:
        last = datetime.date(year, month + 1, 1) - datetime.timedelta(days=1)
    delta = (last.weekday() - weekday) % 7
    return last - datetime.timedelta(days=delta)


def _observed_nearest(holidays: list[NamedHoliday]) -> list[NamedHoliday]:
    """US rule: Saturday holidays move to Friday, Sunday holidays to Monday."""
    shifted = []
    for d, name in holidays:
        if d.weekday() == 5:
            d = d - datetime.timedelta(days=1)
        elif d.weekday() == 6:
            d = d + datetime.timedelta(days=1)
        shifted.append((d, name))
    return shifted


def _observed_substitute(holidays: list[NamedHoliday]) -> list[NamedHoliday]:
    """UK rule: weekend holidays move to the next weekday not already a holiday."""
    taken = {d for d, _ in holidays if d.weekday() < 5}
    shifted = []
    for d, name in sorted(holidays):
        if d.weekday() >= 5:
            while d.weekday() >= 5 or d in taken:
                d += datetime.timedelta(days=1)
            taken.add(d)
        shifted.append((d, name))
    return shifted


def _check_year(year: object) -> int:
    if isinstance(year, bool) or not isinstance(year, int) or not 1 <= year <= 9999:
        raise InvalidDateError(year, "year must be an integer between 1 and 9999")
    return year


# ---------------------------------------------------------------------------
# Country presets
# ---------------------------------------------------------------------------

PRESETS: dict[str, str] = {
    "gb": "England and Wales bank holidays",
    "us": "United States federal holidays",
}


def _us_actual(year: int) -> list[NamedHoliday]:
    return [
        (datetime.date(year, 1, 1), "New Year's Day"),
        (_nth_weekday(year, 1, 0, 3), "Martin Luther King Jr. Day"),
        (_nth_weekday(year, 2, 0, 3), "Presidents' Day"),
        (_last_weekday(year, 5, 0), "Memorial Day"),
        (datetime.date(year, 6, 19), "Juneteenth"),
        (datetime.date(year, 7, 4), "Independence Day"),
        (_nth_weekday(year, 9, 0, 1), "Labor Day"),
        (_nth_weekday(year, 10, 0, 2), "Columbus Day"),
        (datetime.date(year, 11, 11), "Veterans Day"),
        (_nth_weekday(year, 11, 3, 4), "Thanksgiving"),
        (datetime.date(year, 12, 25), "Christmas Day"),
    ]


def _gb_actual(year: int) -> list[NamedHoliday]:
    easter_sunday = easter(year)
    return [
        (datetime.date(year, 1, 1), "New Year's Day"),
        (easter_sunday - datetime.timedelta(days=2), "Good Friday"),
        (easter_sunday + datetime.timedelta(days=1), "Easter Monday"),
        (_nth_weekday(year, 5, 0, 1), "Early May bank holiday"),
        (_last_weekday(year, 5, 0), "Spring bank holiday"),
        (_last_weekday(year, 8, 0), "Summer bank holiday"),
        (datetime.date(year, 12, 25), "Christmas Day"),
        (datetime.date(year, 12, 26), "Boxing Day"),
    ]


_RULES: dict[str, tuple[Callable[[int], list[NamedHoliday]], Callable[[list[NamedHoliday]], list[NamedHoliday]]]] = {
    "gb": (_gb_actual, _observed_substitute),
    "us": (_us_actual, _observed_nearest),
}


def _compute(country: str, year: int, observed: bool) -> list[NamedHoliday]:
    actual, observe = _RULES[country]
    if not observed:
        return sorted(actual(year))
    # Observance can cross a year boundary in either direction.
    candidates: list[NamedHoliday] = []
    for y in (year - 1, year, year + 1):
        if 1 <= y <= 9999:
            candidates.extend(observe(actual(y)))
    return sorted(h for h in candidates if h[0].year == year)


def us_holidays(year: int, observed: bool = False) -> list[NamedHoliday]:
    """US federal holidays for *year*."""
    return _compute("us", _check_year(year), observed)


def gb_holidays(year: int, observed: bool = False) -> list[NamedHoliday]:
    """England and Wales bank holidays for *year*."""
    return _compute("gb", _check_year(year), observed)


def named_holidays(country: str, year: int, observed: bool = False) -> list[NamedHoliday]:
    """Return ``(date, name)`` pairs for the given *country* preset and *year*.

    Raises ``UnknownCountryError`` (a ``KeyError``) if the country is not supported.
    """
    if country not in _RULES:
        raise UnknownCountryError(country, sorted(PRESETS))
    holidays = _compute(country, _check_year(year), observed)
    logger.debug("Computed %d %s holidays for %d (observed=%s)", len(holidays), country, year, observed)
    return holidays


# ---------------------------------------------------------------------------
# Async holiday source
# ---------------------------------------------------------------------------


class HolidayCalendar:
    """Holiday source for one country preset.

    The interface is asynchronous so that a remote or file-backed table can
    replace the built-in rules without changing callers.
    """

    def __init__(self, country: str = "us", *, observed: bool = False) -> None:
        if country not in _RULES:
            raise UnknownCountryError(country, sorted(PRESETS))
        self.country = country
        self.observed = observed

    def __repr__(self) -> str:
        return f"HolidayCalendar(country={self.country!r}, observed={self.observed!r})"

    async def get_holidays(self, year: int) -> list[datetime.date]:
        """Sorted holiday dates of *year*; every date has ``.year == year``."""
        return [d for d, _ in named_holidays(self.country, year, self.observed)]

    async def is_holiday(self, date: DateLike) -> bool:
        """True if *date* falls on a holiday, ignoring time of day."""
        d = to_date(date)
        holidays = await self.get_holidays(d.year)
        return any(is_same_day(h, d) for h in holidays)


async def get_holidays(year: int, country: str = "us", *, observed: bool = False) -> list[datetime.date]:
    """Return the holiday dates of *year* for a country preset."""
    return await HolidayCalendar(country, observed=observed).get_holidays(year)


async def is_holiday(date: DateLike, country: str = "us", *, observed: bool = False) -> bool:
    """Return ``True`` if *date* is a holiday in the given country preset."""
    return await HolidayCalendar(country, observed=observed).is_holiday(date)

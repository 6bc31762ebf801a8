"""datecal: small calendar utilities.

Add days, months or years to dates, compare dates, and look up the
public holidays of a year.
"""

from datecal.clock import Clock, FixedClock, SystemClock, get_current_year
from datecal.dates import DateUnit, add, is_date_before, is_same_day, is_within_range, to_date
from datecal.exceptions import (
    DateCalError,
    InvalidAmountError,
    InvalidDateError,
    InvalidRangeError,
    InvalidUnitError,
    UnknownCountryError,
)
from datecal.holidays import (
    PRESETS,
    HolidayCalendar,
    gb_holidays,
    get_holidays,
    is_holiday,
    named_holidays,
    us_holidays,
)

__all__ = [
    "PRESETS",
    "Clock",
    "DateCalError",
    "DateUnit",
    "FixedClock",
    "HolidayCalendar",
    "InvalidAmountError",
    "InvalidDateError",
    "InvalidRangeError",
    "InvalidUnitError",
    "SystemClock",
    "UnknownCountryError",
    "add",
    "gb_holidays",
    "get_current_year",
    "get_holidays",
    "is_date_before",
    "is_holiday",
    "is_same_day",
    "is_within_range",
    "named_holidays",
    "to_date",
    "us_holidays",
]

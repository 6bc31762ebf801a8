"""Date arithmetic and comparisons.

All functions accept a ``datetime.date``, a ``datetime.datetime`` or an
ISO-8601 string, and never mutate their inputs.

Month and year offsets clamp to the last valid day of the target month:
Jan 31 + 1 month is Feb 28 (Feb 29 in leap years), and Feb 29 + 1 year
is Feb 28.
"""

from __future__ import annotations

import datetime
import enum
import math
import numbers
from typing import Union

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from datecal.exceptions import InvalidAmountError, InvalidDateError, InvalidRangeError, InvalidUnitError

DateLike = Union[datetime.date, datetime.datetime, str]


class DateUnit(str, enum.Enum):
    """Calendar field an offset applies to."""

    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def to_date(value: object) -> datetime.date:
    """Return *value* as a ``date``/``datetime``, parsing ISO-8601 strings.

    Raises ``InvalidDateError`` for unparseable strings and other types.
    """
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return isoparse(value)
        except (ValueError, OverflowError):
            raise InvalidDateError(value) from None
    raise InvalidDateError(value, "expected a date, datetime or ISO-8601 string")


def _to_amount(amount: object) -> int:
    if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
        raise InvalidAmountError(amount, "expected an integer")
    if isinstance(amount, numbers.Integral):
        return int(amount)
    value = float(amount)
    if not math.isfinite(value):
        raise InvalidAmountError(amount, "amount must be finite")
    if not value.is_integer():
        raise InvalidAmountError(amount, "amount must be a whole number")
    return int(value)


def _to_unit(unit: object) -> DateUnit:
    if isinstance(unit, str) and not isinstance(unit, DateUnit):
        unit = unit.lower()
    try:
        return DateUnit(unit)
    except ValueError:
        raise InvalidUnitError(unit, [u.value for u in DateUnit]) from None


def _comparable(
    a: datetime.date, b: datetime.date
) -> tuple[datetime.date, datetime.date]:
    """Promote a plain date to midnight when compared against a datetime."""
    a_is_dt = isinstance(a, datetime.datetime)
    b_is_dt = isinstance(b, datetime.datetime)
    if a_is_dt and not b_is_dt:
        b = datetime.datetime.combine(b, datetime.time(), tzinfo=a.tzinfo)  # type: ignore[union-attr]
    elif b_is_dt and not a_is_dt:
        a = datetime.datetime.combine(a, datetime.time(), tzinfo=b.tzinfo)  # type: ignore[union-attr]
    elif a_is_dt and b_is_dt and (a.utcoffset() is None) != (b.utcoffset() is None):  # type: ignore[union-attr]
        raise InvalidDateError(b, "cannot compare naive and timezone-aware datetimes")
    return a, b


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def add(date: DateLike, amount: int, unit: DateUnit | str = DateUnit.DAYS) -> datetime.date:
    """Return *date* shifted by *amount* units.

    Args:
        date: The starting date. A ``datetime`` keeps its time and tzinfo.
        amount: Signed whole number of units; negative values subtract.
        unit: ``DateUnit.DAYS`` (default), ``MONTHS`` or ``YEARS``.

    Returns:
        A new value of the same type as *date* (strings yield the parsed type).

    Raises:
        InvalidDateError: If *date* is not a valid date.
        InvalidAmountError: If *amount* is not a finite integer, or the
            result falls outside the supported date range.
        InvalidUnitError: If *unit* is not a known unit.
    """
    start = to_date(date)
    n = _to_amount(amount)
    kind = _to_unit(unit)

    try:
        if kind is DateUnit.DAYS:
            return start + datetime.timedelta(days=n)
        if kind is DateUnit.MONTHS:
            return start + relativedelta(months=n)
        return start + relativedelta(years=n)
    except (OverflowError, ValueError):
        raise InvalidAmountError(amount, "result falls outside the supported date range") from None


def is_within_range(date: DateLike, from_: DateLike, to: DateLike) -> bool:
    """True if *date* lies strictly between *from_* and *to*.

    Raises ``InvalidRangeError`` unless *from_* is strictly before *to*.
    """
    d = to_date(date)
    lo, hi = _comparable(to_date(from_), to_date(to))
    if not lo < hi:
        raise InvalidRangeError(from_, to)
    d_lo, lo = _comparable(d, lo)
    d_hi, hi = _comparable(d, hi)
    return lo < d_lo and d_hi < hi


def is_date_before(date: DateLike, compare_date: DateLike) -> bool:
    """True if *date* is strictly earlier than *compare_date*."""
    a, b = _comparable(to_date(date), to_date(compare_date))
    return a < b


def is_same_day(a: DateLike, b: DateLike) -> bool:
    """True if both values fall on the same calendar day, ignoring time of day."""
    x, y = to_date(a), to_date(b)
    return (x.year, x.month, x.day) == (y.year, y.month, y.day)

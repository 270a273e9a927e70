"""
calrep.engines.converter
------------------------
Gregorian <-> Republican conversion through whole-day counts from the
epoch (1 Vendémiaire I = JDN 2375840).
"""

from __future__ import annotations

from bisect import bisect_right
from datetime import datetime

from calrep.core import rules
from calrep.core.errors import OutOfRangeError
from calrep.core.time import DateLike, check_supported, combine_day_count, millisecond_of, to_day_count
from calrep.core.types import RepublicanDate


# ---------------------------------------------------------
# Forward: Gregorian to Republican
# ---------------------------------------------------------

def year_from_day_count(n: int) -> int:
    """Republican year containing day offset n (0 = 1 Vendémiaire I)."""
    starts = rules.year_start_table()
    if n < 0 or n >= starts[-1]:
        raise OutOfRangeError("day_count", n, 0, starts[-1] - 1)
    return bisect_right(starts, n)


def split_day_of_year(year: int, doy: int) -> tuple[int, int, int]:
    """
    Decompose a 1-based day of year into (year, month, day).

    Months are 30 days long, so the complementary days fall out of the same
    division as month 13. A month-13 day past the year's complementary count
    belongs to the next year.
    """
    month = (doy - 1) // rules.MONTH_LENGTH + 1
    day = (doy - 1) % rules.MONTH_LENGTH + 1
    if month == rules.COMPLEMENTARY_MONTH:
        extra = rules.days_in_month(year, month)
        if day > extra:
            year, month, day = year + 1, 1, day - extra
    return year, month, day


def to_republican(value: DateLike) -> RepublicanDate:
    """
    Convert a Gregorian date or naive datetime to a RepublicanDate.

    Raises OutOfRangeError outside [1792-09-22, 1805-12-31 23:59:59.999999].
    Microseconds below the millisecond are truncated.
    """
    dt = check_supported(value)
    n = to_day_count(dt)

    year = year_from_day_count(n)
    doy = n - rules.year_start_table()[year - 1] + 1
    year, month, day = split_day_of_year(year, doy)

    return RepublicanDate(
        year, month, day,
        dt.hour, dt.minute, dt.second, millisecond_of(dt),
    )


# ---------------------------------------------------------
# Inverse: Republican to Gregorian
# ---------------------------------------------------------

def day_count(date: RepublicanDate) -> int:
    """
    Days since 1 Vendémiaire I.

    Y // 4 counts the leap years among 1..Y-1 (III, VII, XI); month 13
    starts right after month 12, so 30 * (M - 1) covers it too.
    """
    Y, M, D = date.year, date.month, date.day
    return 365 * (Y - 1) + Y // 4 + rules.MONTH_LENGTH * (M - 1) + (D - 1)


def to_gregorian(date: RepublicanDate) -> datetime:
    """Convert a RepublicanDate to a naive Gregorian datetime."""
    rules.validate_day(date.year, date.month, date.day, date.era)
    rules.validate_time(date.hour, date.minute, date.second, date.millisecond)
    return combine_day_count(day_count(date), date.hour, date.minute, date.second, date.millisecond)

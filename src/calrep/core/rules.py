"""
calrep.core.rules
-----------------
Constants and predicates of the French Republican calendar.

The year is 12 months of 30 days followed by the complementary days
(sansculottides), modelled as month 13: 5 days, or 6 in a leap year.
Years run from I (1792-09-22) to XIV, which was cut short after
10 Nivôse XIV (1805-12-31).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from .errors import OutOfRangeError

ERA = 1

FIRST_YEAR = 1
LAST_YEAR = 14
LAST_MONTH = 4   # Nivôse XIV
LAST_DAY = 10    # 10 Nivôse XIV

MONTHS_PER_YEAR = 13
COMPLEMENTARY_MONTH = 13
MONTH_LENGTH = 30
DECADE_LENGTH = 10
DECADES_PER_YEAR = 36   # regular months only


def check_range(field: str, value: int, lower: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an int, got {type(value).__name__}")
    if value < lower or value > upper:
        raise OutOfRangeError(field, value, lower, upper)


def _is_leap(year: int) -> bool:
    return (year + 1) % 4 == 0


# ---------------------------------------------------------
# Validators (day => month => year => era)
# ---------------------------------------------------------

def validate_era(era: int) -> None:
    check_range("era", era, ERA, ERA)


def validate_year(year: int, era: int = ERA) -> None:
    validate_era(era)
    check_range("year", year, FIRST_YEAR, LAST_YEAR)


def validate_month(year: int, month: int, era: int = ERA) -> None:
    validate_year(year, era)
    check_range("month", month, 1, months_in_year(year, era))


def validate_day(year: int, month: int, day: int, era: int = ERA) -> None:
    validate_month(year, month, era)
    check_range("day", day, 1, _days_in_month(year, month))


def validate_hour(hour: int) -> None:
    check_range("hour", hour, 0, 23)


def validate_minute(minute: int) -> None:
    check_range("minute", minute, 0, 59)


def validate_second(second: int) -> None:
    check_range("second", second, 0, 59)


def validate_millisecond(millisecond: int) -> None:
    check_range("millisecond", millisecond, 0, 999)


def validate_time(hour: int, minute: int, second: int, millisecond: int) -> None:
    validate_hour(hour)
    validate_minute(minute)
    validate_second(second)
    validate_millisecond(millisecond)


# ---------------------------------------------------------
# Predicates and sizes
# ---------------------------------------------------------

def is_leap_year(year: int, era: int = ERA) -> bool:
    """Leap years carry a sixth complementary day: III, VII, XI."""
    validate_year(year, era)
    return _is_leap(year)


def months_in_year(year: int, era: int = ERA) -> int:
    validate_year(year, era)
    return LAST_MONTH if year == LAST_YEAR else MONTHS_PER_YEAR


def _days_in_month(year: int, month: int) -> int:
    if month == COMPLEMENTARY_MONTH:
        return 6 if _is_leap(year) else 5
    if year == LAST_YEAR and month == LAST_MONTH:
        return LAST_DAY
    return MONTH_LENGTH


def days_in_month(year: int, month: int, era: int = ERA) -> int:
    validate_month(year, month, era)
    return _days_in_month(year, month)


def days_in_year(year: int, era: int = ERA) -> int:
    validate_year(year, era)
    if year == LAST_YEAR:
        return MONTH_LENGTH * (LAST_MONTH - 1) + LAST_DAY
    return 366 if _is_leap(year) else 365


def is_leap_month(year: int, month: int, era: int = ERA) -> bool:
    validate_month(year, month, era)
    return month == COMPLEMENTARY_MONTH and _is_leap(year)


def is_leap_day(year: int, month: int, day: int, era: int = ERA) -> bool:
    """True only for the jour de la Révolution (6th complementary day)."""
    validate_day(year, month, day, era)
    return is_leap_month(year, month, era) and day == 6


# ---------------------------------------------------------
# Year-start table
# ---------------------------------------------------------

@lru_cache(maxsize=None)
def year_start_table() -> Tuple[int, ...]:
    """
    Day offsets from 1 Vendémiaire I to 1 Vendémiaire of each year.

    Index i holds the start of year i + 1. The last entry is one past
    10 Nivôse XIV, so every supported day offset d satisfies
    table[Y - 1] <= d < table[Y] for exactly one year Y.
    """
    starts = [0]
    for year in range(FIRST_YEAR, LAST_YEAR + 1):
        starts.append(starts[-1] + days_in_year(year))
    return tuple(starts)


def year_start(year: int) -> int:
    """Days from the epoch to 1 Vendémiaire of `year`."""
    validate_year(year)
    return year_start_table()[year - 1]

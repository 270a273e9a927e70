"""
calrep.engines.arithmetic
-------------------------
Calendar arithmetic on RepublicanDate values.

Months (30 days) and weeks (10-day décades) are uniform outside the
complementary days, so months and décades are added as linear indices:

    month index  = 12 * (Y - 1) + (M - 1)
    decade index = 36 * (Y - 1) + 3 * (M - 1) + (D - 1) // 10

The result is validated by the RepublicanDate constructor; XIV is short
(Nivôse ends on day 10) and anything past it raises OutOfRangeError.
"""

from __future__ import annotations

from dataclasses import replace

from calrep.core import rules
from calrep.core.errors import InvalidOperationError, OutOfRangeError
from calrep.core.types import RepublicanDate
from calrep.engines.converter import day_count, split_day_of_year, year_from_day_count


def _reject_complementary(date: RepublicanDate, unit: str) -> None:
    if date.is_complementary:
        raise InvalidOperationError(
            f"Addition of {unit} starting from the complementary days is not supported: {date}"
        )


def _year_from_index(index: int, per_year: int) -> int:
    year = index // per_year + 1
    rules.check_range("year", year, rules.FIRST_YEAR, rules.LAST_YEAR)
    return year


def add_years(date: RepublicanDate, years: int) -> RepublicanDate:
    """
    Shift the year, keeping month and day.

    The jour de la Révolution (6th complementary day) only exists in leap
    years; in any other target year it becomes 1 Vendémiaire of that year,
    so (3, 13, 6) + 1 gives (4, 1, 1), the day after the leap day.
    """
    if years == 0:
        return date

    year = date.year + years
    month, day = date.month, date.day
    rules.validate_year(year, date.era)

    if month == rules.COMPLEMENTARY_MONTH and day == 6 and not rules.is_leap_year(year, date.era):
        month, day = 1, 1

    return replace(date, year=year, month=month, day=day)


def add_months(date: RepublicanDate, months: int) -> RepublicanDate:
    """Shift by whole 30-day months, keeping the day of the month."""
    if months == 0:
        return date
    _reject_complementary(date, "months")

    index = 12 * (date.year - 1) + (date.month - 1) + months
    year = _year_from_index(index, 12)
    month = index % 12 + 1

    return replace(date, year=year, month=month)


def add_weeks(date: RepublicanDate, weeks: int) -> RepublicanDate:
    """Shift by whole décades, keeping the day within the décade."""
    if weeks == 0:
        return date
    _reject_complementary(date, "weeks")

    per_month = rules.MONTH_LENGTH // rules.DECADE_LENGTH
    index = (
        rules.DECADES_PER_YEAR * (date.year - 1)
        + per_month * (date.month - 1)
        + (date.day - 1) // rules.DECADE_LENGTH
        + weeks
    )
    year = _year_from_index(index, rules.DECADES_PER_YEAR)
    week = index % rules.DECADES_PER_YEAR
    month = week // per_month + 1
    day = rules.DECADE_LENGTH * (week % per_month) + date.day_of_week

    return replace(date, year=year, month=month, day=day)


def add_days(date: RepublicanDate, days: int) -> RepublicanDate:
    """Shift by whole days, across complementary days and year boundaries."""
    if days == 0:
        return date

    n = day_count(date) + days
    try:
        year = year_from_day_count(n)
    except OutOfRangeError as e:
        raise OutOfRangeError(
            "days", days, message=f"adding {days} days to {date} leaves the supported range"
        ) from e
    doy = n - rules.year_start_table()[year - 1] + 1
    year, month, day = split_day_of_year(year, doy)

    return replace(date, year=year, month=month, day=day)

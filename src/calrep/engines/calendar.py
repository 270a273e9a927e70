"""
calrep.engines.calendar
-----------------------
Adapter exposing the Republican calendar through a datetime-based
calendar object (years, months, weeks and days of Gregorian instants).

Holds no calendar logic of its own: every method converts through
calrep.engines.converter and delegates to the rules and arithmetic modules.
"""

from __future__ import annotations

from datetime import datetime
from typing import Tuple

from calrep.core import rules
from calrep.core.errors import InvalidOperationError
from calrep.core.time import MAX_SUPPORTED, MIN_SUPPORTED, DateLike, check_supported
from calrep.core.types import RepublicanDate
from calrep.engines import arithmetic
from calrep.engines.converter import to_gregorian, to_republican


class RepublicanCalendar:
    """
    The French Republican calendar as a solar calendar over Gregorian datetimes.
    """
    eras: Tuple[int, ...] = (rules.ERA,)
    min_supported: datetime = MIN_SUPPORTED
    max_supported: datetime = MAX_SUPPORTED

    # ---------------------------------------------------------
    # Arithmetic (datetime in, datetime out)
    # ---------------------------------------------------------

    def add_years(self, time: DateLike, years: int) -> datetime:
        return self._shift(time, arithmetic.add_years, years)

    def add_months(self, time: DateLike, months: int) -> datetime:
        return self._shift(time, arithmetic.add_months, months)

    def add_weeks(self, time: DateLike, weeks: int) -> datetime:
        return self._shift(time, arithmetic.add_weeks, weeks)

    def add_days(self, time: DateLike, days: int) -> datetime:
        return self._shift(time, arithmetic.add_days, days)

    def _shift(self, time: DateLike, op, n: int) -> datetime:
        dt = check_supported(time)
        if n == 0:
            return dt
        return to_gregorian(op(to_republican(dt), n))

    # ---------------------------------------------------------
    # Date parts of an instant
    # ---------------------------------------------------------

    def get_era(self, time: DateLike) -> int:
        return to_republican(time).era

    def get_year(self, time: DateLike) -> int:
        return to_republican(time).year

    def get_month(self, time: DateLike) -> int:
        return to_republican(time).month

    def get_day_of_month(self, time: DateLike) -> int:
        return to_republican(time).day

    def get_day_of_year(self, time: DateLike) -> int:
        return to_republican(time).day_of_year

    def get_week_of_year(self, time: DateLike) -> int:
        return to_republican(time).week_of_year

    def get_day_of_week(self, time: DateLike) -> int:
        raise InvalidOperationError(
            "The seven-day week does not exist in the Republican calendar; use get_week_of_year()"
        )

    # ---------------------------------------------------------
    # Calendar structure
    # ---------------------------------------------------------

    def get_days_in_month(self, year: int, month: int, era: int = rules.ERA) -> int:
        return rules.days_in_month(year, month, era)

    def get_days_in_year(self, year: int, era: int = rules.ERA) -> int:
        return rules.days_in_year(year, era)

    def get_months_in_year(self, year: int, era: int = rules.ERA) -> int:
        return rules.months_in_year(year, era)

    def is_leap_year(self, year: int, era: int = rules.ERA) -> bool:
        return rules.is_leap_year(year, era)

    def is_leap_month(self, year: int, month: int, era: int = rules.ERA) -> bool:
        return rules.is_leap_month(year, month, era)

    def is_leap_day(self, year: int, month: int, day: int, era: int = rules.ERA) -> bool:
        return rules.is_leap_day(year, month, day, era)

    def to_datetime(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        era: int = rules.ERA,
    ) -> datetime:
        return to_gregorian(RepublicanDate(year, month, day, hour, minute, second, millisecond, era))

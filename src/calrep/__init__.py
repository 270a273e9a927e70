"""calrep public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    to_republican,
    to_gregorian,
    make_date,
    add_years,
    add_months,
    add_weeks,
    add_days,
    is_leap_year,
    months_in_year,
    days_in_month,
    days_in_year,
    year_bounds,
    new_year_day,
    format_date,
)
from .core.errors import CalrepError, InvalidOperationError, OutOfRangeError
from .core.types import RepublicanDate
from .engines.calendar import RepublicanCalendar

__all__ = [
    "to_republican",
    "to_gregorian",
    "make_date",
    "add_years",
    "add_months",
    "add_weeks",
    "add_days",
    "is_leap_year",
    "months_in_year",
    "days_in_month",
    "days_in_year",
    "year_bounds",
    "new_year_day",
    "format_date",
    "RepublicanDate",
    "RepublicanCalendar",
    "CalrepError",
    "InvalidOperationError",
    "OutOfRangeError",
]

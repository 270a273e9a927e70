from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict

from .core import rules
from .core.time import DateLike, from_day_count
from .core.types import RepublicanDate
from .engines import arithmetic
from .engines import converter
from .format.formatter import format_date as _format_date


def to_republican(value: DateLike) -> RepublicanDate:
    return converter.to_republican(value)

def to_gregorian(t: RepublicanDate) -> datetime:
    return converter.to_gregorian(t)

def make_date(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    *,
    era: int = rules.ERA,
) -> RepublicanDate:
    return RepublicanDate(year, month, day, hour, minute, second, millisecond, era)

# ============================================================
# Arithmetic
# ============================================================

def add_years(t: RepublicanDate, years: int) -> RepublicanDate:
    return arithmetic.add_years(t, years)

def add_months(t: RepublicanDate, months: int) -> RepublicanDate:
    return arithmetic.add_months(t, months)

def add_weeks(t: RepublicanDate, weeks: int) -> RepublicanDate:
    return arithmetic.add_weeks(t, weeks)

def add_days(t: RepublicanDate, days: int) -> RepublicanDate:
    return arithmetic.add_days(t, days)

# ============================================================
# Calendar structure
# ============================================================

def is_leap_year(year: int) -> bool:
    return rules.is_leap_year(year)

def months_in_year(year: int) -> int:
    return rules.months_in_year(year)

def days_in_month(year: int, month: int) -> int:
    return rules.days_in_month(year, month)

def days_in_year(year: int) -> int:
    return rules.days_in_year(year)

def year_bounds(year: int, *, as_date: bool = True) -> Dict[str, Any]:
    """First and last day of a Republican year, as day counts and Gregorian dates."""
    first = rules.year_start(year)
    last = first + rules.days_in_year(year) - 1
    out: Dict[str, Any] = {
        "year": year,
        "is_leap": rules.is_leap_year(year),
        "days": rules.days_in_year(year),
        "months": rules.months_in_year(year),
        "first_day_count": first,
        "last_day_count": last,
    }
    if as_date:
        out["first_date"] = from_day_count(first)
        out["last_date"] = from_day_count(last)
    return out

def new_year_day(year: int) -> date:
    """Gregorian date of 1 Vendémiaire of `year`."""
    return from_day_count(rules.year_start(year))

def format_date(value: Any, pattern: str = "D") -> str:
    return _format_date(value, pattern)

from __future__ import annotations
from datetime import date, datetime, time
from typing import Union

from .errors import OutOfRangeError

DateLike = Union[date, datetime]


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)


# 1 Vendémiaire I. The calendar is not proleptic.
EPOCH = date(1792, 9, 22)
EPOCH_JDN = 2375840

# Abolished after 10 Nivôse XIV.
LAST_DATE = date(1805, 12, 31)

MIN_SUPPORTED = datetime.combine(EPOCH, time.min)
MAX_SUPPORTED = datetime.combine(LAST_DATE, time.max)


def to_day_count(d: DateLike) -> int:
    """Whole days elapsed since 1 Vendémiaire I (negative before the epoch)."""
    if isinstance(d, datetime):
        d = d.date()
    return to_jdn(d) - EPOCH_JDN

def from_day_count(n: int) -> date:
    return from_jdn(EPOCH_JDN + n)


def as_datetime(value: DateLike) -> datetime:
    """Promote a date to midnight; naive wall-clock datetimes only."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            raise OutOfRangeError(
                "tzinfo", value.tzinfo,
                message="timezone-aware datetimes are not supported; pass a naive civil time",
            )
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise TypeError(f"expected date or datetime, got {type(value).__name__}")


def check_supported(value: DateLike) -> datetime:
    dt = as_datetime(value)
    if not (MIN_SUPPORTED <= dt <= MAX_SUPPORTED):
        raise OutOfRangeError("time", dt, MIN_SUPPORTED, MAX_SUPPORTED)
    return dt


def millisecond_of(dt: datetime) -> int:
    """Millisecond part of a datetime; sub-millisecond precision is dropped."""
    return dt.microsecond // 1000


def combine_day_count(n: int, hour: int, minute: int, second: int, millisecond: int) -> datetime:
    return datetime.combine(from_day_count(n), time(hour, minute, second, millisecond * 1000))


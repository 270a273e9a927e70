# tests/test_api.py

from datetime import date

import pytest

import calrep
from calrep import OutOfRangeError, RepublicanDate


def test_make_date():
    assert calrep.make_date(8, 2, 18, 7) == RepublicanDate(8, 2, 18, 7, 0, 0, 0)
    with pytest.raises(OutOfRangeError) as exc:
        calrep.make_date(14, 4, 11)
    assert exc.value.field == "day"
    with pytest.raises(OutOfRangeError) as exc:
        calrep.make_date(14, 5, 1)
    assert exc.value.field == "month"
    with pytest.raises(OutOfRangeError) as exc:
        calrep.make_date(1, 1, 1, era=2)
    assert exc.value.field == "era"


@pytest.mark.parametrize(
    "year, first, last, days, leap",
    [
        (1, date(1792, 9, 22), date(1793, 9, 21), 365, False),
        (3, date(1794, 9, 22), date(1795, 9, 22), 366, True),
        (4, date(1795, 9, 23), date(1796, 9, 21), 365, False),
        (14, date(1805, 9, 23), date(1805, 12, 31), 100, False),
    ],
)
def test_year_bounds(year, first, last, days, leap):
    b = calrep.year_bounds(year)
    assert b["first_date"] == first
    assert b["last_date"] == last
    assert b["days"] == days
    assert b["is_leap"] is leap
    assert b["last_day_count"] - b["first_day_count"] + 1 == days


def test_year_bounds_without_dates():
    b = calrep.year_bounds(2, as_date=False)
    assert "first_date" not in b
    assert b["first_day_count"] == 365


def test_new_year_day():
    assert calrep.new_year_day(1) == date(1792, 9, 22)
    assert calrep.new_year_day(8) == date(1799, 9, 23)
    assert calrep.new_year_day(14) == date(1805, 9, 23)
    with pytest.raises(OutOfRangeError):
        calrep.new_year_day(15)

# tests/test_calendar.py

from datetime import date, datetime

import pytest

from calrep import InvalidOperationError, OutOfRangeError, RepublicanCalendar


@pytest.fixture
def cal():
    return RepublicanCalendar()


def test_supported_range(cal):
    assert cal.eras == (1,)
    assert cal.min_supported == datetime(1792, 9, 22)
    assert cal.max_supported == datetime(1805, 12, 31, 23, 59, 59, 999999)


@pytest.mark.parametrize(
    "start, days, expected",
    [
        (date(1792, 9, 22), 1, datetime(1792, 9, 23)),
        (date(1793, 12, 26), -26, datetime(1793, 11, 30)),
        (date(1795, 9, 16), 10, datetime(1795, 9, 26)),
    ],
)
def test_add_days(cal, start, days, expected):
    assert cal.add_days(start, days) == expected


@pytest.mark.parametrize(
    "start, months, expected",
    [
        (date(1792, 9, 22), 1, datetime(1792, 10, 22)),
        (date(1793, 12, 26), -2, datetime(1793, 10, 27)),
    ],
)
def test_add_months(cal, start, months, expected):
    assert cal.add_months(start, months) == expected


@pytest.mark.parametrize(
    "start, weeks, expected",
    [
        (date(1792, 9, 22), 1, datetime(1792, 10, 2)),
        (date(1793, 12, 26), -2, datetime(1793, 12, 6)),
    ],
)
def test_add_weeks(cal, start, weeks, expected):
    assert cal.add_weeks(start, weeks) == expected


@pytest.mark.parametrize(
    "start, years, expected",
    [
        (date(1792, 9, 22), 1, datetime(1793, 9, 22)),
        (date(1799, 11, 9), -3, datetime(1796, 11, 8)),
        (date(1795, 9, 22), 1, datetime(1795, 9, 23)),
        (date(1795, 9, 22), 2, datetime(1796, 9, 22)),
    ],
)
def test_add_years(cal, start, years, expected):
    assert cal.add_years(start, years) == expected


def test_time_of_day_is_preserved(cal):
    dt = datetime(1799, 11, 9, 22, 33, 44, 555000)
    assert cal.add_months(dt, 1) == datetime(1799, 12, 9, 22, 33, 44, 555000)


@pytest.mark.parametrize(
    "op, start, n",
    [
        ("add_days", date(1792, 9, 22), -1),
        ("add_days", date(1805, 1, 1), 365),
        ("add_months", date(1792, 9, 22), -1),
        ("add_months", date(1805, 1, 1), 12),
        ("add_weeks", date(1792, 10, 2), -2),
        ("add_weeks", date(1805, 12, 22), 1),
        ("add_years", date(1792, 9, 22), -1),
        ("add_years", date(1805, 1, 1), 1),
        ("add_years", date(1792, 9, 21), 0),
        ("add_months", date(1806, 1, 1), 0),
    ],
)
def test_arithmetic_out_of_range(cal, op, start, n):
    with pytest.raises(OutOfRangeError):
        getattr(cal, op)(start, n)


@pytest.mark.parametrize("op", ["add_months", "add_weeks"])
def test_arithmetic_from_complementary_days(cal, op):
    # 1795-09-20 is the 4th complementary day of year III
    with pytest.raises(InvalidOperationError):
        getattr(cal, op)(date(1795, 9, 20), 1)


def test_zero_shift_returns_the_instant(cal):
    assert cal.add_months(date(1795, 9, 20), 0) == datetime(1795, 9, 20)


@pytest.mark.parametrize(
    "d, year, month, day, doy, week",
    [
        (date(1792, 9, 22), 1, 1, 1, 1, 1),
        (date(1799, 11, 9), 8, 2, 18, 48, 5),
        (date(1800, 9, 22), 8, 13, 5, 365, 37),
        (date(1805, 12, 31), 14, 4, 10, 100, 10),
    ],
)
def test_date_parts(cal, d, year, month, day, doy, week):
    assert cal.get_era(d) == 1
    assert cal.get_year(d) == year
    assert cal.get_month(d) == month
    assert cal.get_day_of_month(d) == day
    assert cal.get_day_of_year(d) == doy
    assert cal.get_week_of_year(d) == week


@pytest.mark.parametrize("d", [date(1792, 9, 21), date(1806, 1, 1)])
def test_date_parts_out_of_range(cal, d):
    with pytest.raises(OutOfRangeError):
        cal.get_year(d)


def test_day_of_week_is_not_applicable(cal):
    with pytest.raises(InvalidOperationError):
        cal.get_day_of_week(date(1799, 11, 9))


def test_structure(cal):
    assert cal.get_days_in_month(1, 1) == 30
    assert cal.get_days_in_month(14, 4) == 10
    assert cal.get_days_in_year(2) == 365
    assert cal.get_days_in_year(7) == 366
    assert cal.get_days_in_year(14) == 100
    assert cal.get_months_in_year(1) == 13
    assert cal.get_months_in_year(14) == 4
    assert cal.is_leap_year(3)
    assert cal.is_leap_month(3, 13)
    assert cal.is_leap_day(3, 13, 6)
    assert not cal.is_leap_day(3, 13, 5)
    with pytest.raises(OutOfRangeError):
        cal.get_days_in_year(15)
    with pytest.raises(OutOfRangeError):
        cal.get_days_in_month(1, 1, era=2)


def test_to_datetime(cal):
    assert cal.to_datetime(8, 2, 18, 22, 33, 44, 555) == datetime(1799, 11, 9, 22, 33, 44, 555000)
    assert cal.to_datetime(14, 4, 10) == datetime(1805, 12, 31)
    with pytest.raises(OutOfRangeError):
        cal.to_datetime(14, 4, 11)

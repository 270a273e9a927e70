# tests/test_rules.py

import pytest

from calrep.core import rules
from calrep.core.errors import OutOfRangeError


def test_leap_year_law():
    for y in range(1, 15):
        assert rules.is_leap_year(y) == ((y + 1) % 4 == 0)

    assert [y for y in range(1, 15) if rules.is_leap_year(y)] == [3, 7, 11]
    for y in (1, 2, 10):
        assert not rules.is_leap_year(y)


@pytest.mark.parametrize("year", [-1, 0, 15])
def test_invalid_year(year):
    with pytest.raises(OutOfRangeError) as exc:
        rules.is_leap_year(year)
    assert exc.value.field == "year"
    assert exc.value.value == year


@pytest.mark.parametrize("era", [0, 2])
def test_invalid_era_is_checked_before_year(era):
    with pytest.raises(OutOfRangeError) as exc:
        rules.validate_day(99, 99, 99, era)
    assert exc.value.field == "era"


def test_months_in_year():
    assert rules.months_in_year(1) == 13
    assert rules.months_in_year(13) == 13
    assert rules.months_in_year(14) == 4


@pytest.mark.parametrize(
    "year, month, expected",
    [(1, 1, 30), (8, 3, 30), (14, 4, 10), (2, 13, 5), (3, 13, 6), (11, 13, 6), (12, 13, 5)],
)
def test_days_in_month(year, month, expected):
    assert rules.days_in_month(year, month) == expected


@pytest.mark.parametrize("year, month", [(1, 0), (3, 14), (14, 5)])
def test_days_in_month_invalid_month(year, month):
    with pytest.raises(OutOfRangeError) as exc:
        rules.days_in_month(year, month)
    assert exc.value.field == "month"


@pytest.mark.parametrize("year, expected", [(2, 365), (7, 366), (14, 100)])
def test_days_in_year(year, expected):
    assert rules.days_in_year(year) == expected


@pytest.mark.parametrize(
    "year, month, day",
    [(1, 1, 0), (1, 1, 31), (1, 13, 6), (2, 13, 6), (3, 13, 7), (14, 4, 11)],
)
def test_invalid_day(year, month, day):
    with pytest.raises(OutOfRangeError) as exc:
        rules.validate_day(year, month, day)
    assert exc.value.field == "day"


def test_complementary_days_of_leap_year():
    rules.validate_day(3, 13, 6)
    assert rules.is_leap_month(3, 13)
    assert not rules.is_leap_month(3, 12)
    assert not rules.is_leap_month(4, 13)
    assert rules.is_leap_day(3, 13, 6)
    assert not rules.is_leap_day(3, 13, 5)


@pytest.mark.parametrize(
    "validator, field, bad",
    [
        (rules.validate_hour, "hour", 24),
        (rules.validate_hour, "hour", -1),
        (rules.validate_minute, "minute", 60),
        (rules.validate_second, "second", 60),
        (rules.validate_millisecond, "millisecond", 1000),
        (rules.validate_millisecond, "millisecond", -1),
    ],
)
def test_time_validators(validator, field, bad):
    with pytest.raises(OutOfRangeError) as exc:
        validator(bad)
    assert exc.value.field == field


def test_error_message_names_bounds():
    with pytest.raises(OutOfRangeError, match="day must be between 1 and 5, got 6"):
        rules.validate_day(1, 13, 6)


def test_year_start_table():
    table = rules.year_start_table()
    assert table is rules.year_start_table()
    assert len(table) == 15
    assert table[0] == 0
    # Historical new years: IV on 1795-09-23, XIV on 1805-09-23
    assert rules.year_start(4) == 1096
    assert rules.year_start(14) == 4748
    # One past 10 Nivôse XIV
    assert table[-1] == 4848
    for y in range(1, 15):
        assert rules.year_start(y) == 365 * (y - 1) + y // 4

import datetime

import pytest

from clinicdesk.date import Date


def test_str_pads_day_and_month():
    assert str(Date(5, 3, 2024)) == "05/03/2024"


def test_parse_round_trip():
    original = Date(17, 11, 1999)
    assert Date.parse(str(original)) == original


def test_parse_accepts_negative_parts_as_absolute():
    assert Date.parse("-5/-3/-2024") == Date(5, 3, 2024)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        Date.parse("not a date")


def test_parse_rejects_missing_year():
    with pytest.raises(ValueError):
        Date.parse("5/6")


def test_negative_constructor_parts():
    assert Date(-5, -3, -2024) == Date(5, 3, 2024)


def test_leap_day_is_kept_in_leap_year():
    date = Date(29, 2, 2024)
    assert (date.day, date.month, date.year) == (29, 2, 2024)


def test_leap_day_overflows_in_common_year():
    date = Date(29, 2, 2023)
    assert date.month == 3
    assert date.day == 1
    assert date.year == 2023


def test_day_overflow_carries_into_next_year():
    date = Date(32, 12, 2023)
    assert date.year == 2024
    assert date.month == 1
    assert date > Date(31, 12, 2023)


@pytest.mark.parametrize(
    "year, leap",
    [(2000, True), (1900, False), (2024, True), (2023, False)],
)
def test_is_leap_year(year, leap):
    assert Date.is_leap_year(year) is leap


def test_from_days_zero_is_first_day():
    assert Date.from_days(0) == Date(1, 1, 1)


def test_from_days_matches_constructor():
    assert Date.from_days(31) == Date(31, 1, 1)
    assert Date.from_days(-40) == Date.from_days(40)


def test_ordering():
    dates = [Date(2, 1, 2024), Date(1, 1, 2024), Date(1, 12, 2023)]
    assert sorted(dates) == [Date(1, 12, 2023), Date(1, 1, 2024), Date(2, 1, 2024)]
    assert Date(1, 1, 2024) <= Date(1, 1, 2024)
    assert Date(1, 2, 2024) >= Date(31, 1, 2024)
    assert Date(1, 1, 2024) != Date(2, 1, 2024)


def test_equal_dates_hash_equal():
    assert len({Date(1, 1, 2024), Date(1, 1, 2024), Date(2, 1, 2024)}) == 2


def test_today_matches_system_date():
    now = datetime.date.today()
    today = Date.today()
    assert (today.day, today.month, today.year) == (now.day, now.month, now.year)


def test_comparison_with_other_type_is_unequal():
    assert (Date(1, 1, 2024) == "01/01/2024") is False
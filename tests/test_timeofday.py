import datetime

import pytest

from clinicdesk.timeofday import Time


def test_str_pads_fields():
    assert str(Time(1, 2, 3)) == "01:02:03"


def test_parse_round_trip():
    original = Time(13, 45, 9)
    assert Time.parse(str(original)) == original


def test_parse_negative_parts_are_absolute():
    assert Time.parse("-1:-2:-3") == Time(1, 2, 3)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        Time.parse("noon")


@pytest.mark.parametrize("seconds", [0, 59, 60, 3599, 3661, 86399])
def test_seconds_round_trip(seconds):
    assert Time.from_seconds(seconds).to_seconds() == seconds


def test_overflow_is_normalized():
    time = Time(0, 61, 75)
    assert time.minute < 60
    assert time.second < 60
    assert time == Time.from_seconds(61 * 60 + 75)


def test_negative_constructor_parts():
    assert Time(-2, -3, -4) == Time(2, 3, 4)


def test_from_seconds_matches_constructor():
    assert Time.from_seconds(3661) == Time(0, 0, 3661)


def test_subtraction_gives_elapsed_seconds():
    later = Time(10, 30, 0)
    earlier = Time(9, 15, 30)
    assert later - earlier == later.to_seconds() - earlier.to_seconds()
    assert later - later == 0


def test_subtracting_later_time_raises():
    with pytest.raises(ValueError, match="cannot subtract a later time"):
        Time(8, 0, 0) - Time(9, 0, 0)


def test_ordering():
    times = [Time(10, 0, 0), Time(9, 59, 59), Time(10, 0, 1)]
    assert sorted(times) == [Time(9, 59, 59), Time(10, 0, 0), Time(10, 0, 1)]
    assert Time(1, 0, 0) >= Time(0, 59, 59)
    assert Time(1, 0, 0) <= Time(1, 0, 0)


def test_equal_times_hash_equal():
    assert len({Time(1, 2, 3), Time(0, 62, 3), Time(1, 2, 4)}) == 2


def test_now_is_close_to_system_time():
    before = datetime.datetime.now()
    current = Time.now()
    after = datetime.datetime.now()
    low = Time(before.hour, before.minute, before.second)
    high = Time(after.hour, after.minute, after.second)
    if low <= high:
        assert low <= current <= high
    else:
        assert current >= low or current <= high
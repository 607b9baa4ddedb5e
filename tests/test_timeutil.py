import time as _time
from datetime import datetime, time, timedelta

from vfoxkit.util.timeutil import get_begin_of_today, get_timestamp, is_before_today


def test_get_timestamp_is_now():
    ts = get_timestamp()
    assert ts != 0
    assert abs(ts - _time.time()) < 5


def test_is_before_today():
    yesterday = int((datetime.now() - timedelta(days=1)).timestamp())
    assert is_before_today(yesterday) is True

    tomorrow = int((datetime.now() + timedelta(days=1)).timestamp())
    assert is_before_today(tomorrow) is False


def test_begin_of_today_is_local_midnight():
    begin = get_begin_of_today()
    assert datetime.fromtimestamp(begin).time() == time(0, 0)
    assert datetime.fromtimestamp(begin).date() == datetime.now().date()
    assert begin <= get_timestamp()


def test_boundary_of_today():
    begin = get_begin_of_today()
    assert is_before_today(begin) is False
    assert is_before_today(begin - 1) is True
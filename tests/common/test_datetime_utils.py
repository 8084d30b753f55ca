from datetime import datetime, timedelta, timezone

from src.attendance_overtime.attendance_overtime.common.datetime_utils import (
    floor_minutes,
    format_duration,
    parse_iso_datetime,
    same_awareness,
)


def test_parse_iso_datetime_accepts_z_suffix():
    assert parse_iso_datetime("2025-01-06T09:00:00Z") == datetime(2025, 1, 6, 9, 0, tzinfo=timezone.utc)


def test_parse_iso_datetime_keeps_naive_values_naive():
    assert parse_iso_datetime("2025-01-06T09:00:00").tzinfo is None


def test_floor_minutes_truncates():
    assert floor_minutes(timedelta(minutes=10, seconds=59)) == 10


def test_format_duration():
    assert format_duration(135) == "2h 15m"
    assert format_duration(0) == "0h 0m"


def test_same_awareness():
    naive = datetime(2025, 1, 6, 9, 0)
    aware = naive.replace(tzinfo=timezone.utc)
    assert same_awareness(naive, naive)
    assert same_awareness(aware, aware)
    assert not same_awareness(naive, aware)

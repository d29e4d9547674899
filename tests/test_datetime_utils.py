from datetime import date, datetime, time, timedelta, timezone

import pytest

from healthcare_pro.utils import (
    day_of_week_index,
    format_clock_time,
    format_short_date,
    parse_clock_time,
)
from healthcare_pro.utils.datetime import _resolve_timezone


def test_day_of_week_index_starts_on_sunday() -> None:
    assert day_of_week_index(date(2026, 10, 18)) == 0  # Sunday
    assert day_of_week_index(date(2026, 10, 19)) == 1
    assert day_of_week_index(date(2026, 10, 24)) == 6


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("08:30", time(8, 30)),
        ("00:15:00", time(0, 15)),
        (time(7, 5, 59), time(7, 5)),
        (datetime(2026, 1, 1, 21, 45), time(21, 45)),
        ("25:00", None),
        ("soon", None),
        (None, None),
    ],
)
def test_parse_clock_time(value, expected) -> None:
    assert parse_clock_time(value) == expected


def test_parse_clock_time_default() -> None:
    assert parse_clock_time("", time(8, 0)) == time(8, 0)


def test_format_helpers() -> None:
    assert format_clock_time(time(9, 5)) == "09:05"
    assert format_clock_time(None) == ""
    assert format_short_date(date(2026, 10, 21)) == "10/21/2026"
    assert format_short_date(None) == ""


def test_offset_timezones_are_supported() -> None:
    assert _resolve_timezone("UTC-05:00") == timezone(-timedelta(hours=5))

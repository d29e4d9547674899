"""Utility helpers for reusable functionality."""

from .datetime import (
    day_of_week_index,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    format_clock_time,
    format_short_date,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    parse_clock_time,
)

__all__ = [
    "day_of_week_index",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "format_clock_time",
    "format_short_date",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "parse_clock_time",
]

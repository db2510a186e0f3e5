from datetime import datetime

from src.time_tracker.time_tracker.common.datetime_utils import format_entry_date, hours_between


def test_format_entry_date_matches_short_us_style():
    assert format_entry_date(datetime(2026, 10, 9, 7, 5)) == "Oct 9, 2026"
    assert format_entry_date(datetime(2025, 1, 31, 23, 59)) == "Jan 31, 2025"


def test_hours_between_rounds_to_two_decimals():
    start = datetime(2026, 1, 5, 8, 0, 0)
    assert hours_between(start, datetime(2026, 1, 5, 16, 30, 0)) == 8.5
    assert hours_between(start, datetime(2026, 1, 5, 8, 20, 0)) == 0.33
    assert hours_between(start, start) == 0.0

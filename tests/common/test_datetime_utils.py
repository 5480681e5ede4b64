import pytest

from src.attendance_preview.attendance_preview.common.datetime_utils import (
    format_minutes_clock,
    format_minutes_label,
    normalize_minutes,
    parse_time_of_day,
)
from src.attendance_preview.attendance_preview.core.exceptions import ValidationError


def test_parse_time_of_day_truncates_seconds():
    assert parse_time_of_day("08:00:59") == 480
    assert parse_time_of_day("17:30") == 1050
    assert parse_time_of_day("7:05") == 425


@pytest.mark.parametrize("value", ["", "8", "24:00", "12:60", "aa:bb", None])
def test_parse_time_of_day_rejects_malformed(value):
    with pytest.raises(ValidationError):
        parse_time_of_day(value)


def test_normalize_minutes_wraps_day():
    assert normalize_minutes(1440) == 0
    assert normalize_minutes(-30) == 1410


def test_formatting():
    assert format_minutes_clock(1050) == "17:30:00"
    assert format_minutes_label(0) == "12:00 AM"
    assert format_minutes_label(720) == "12:00 PM"
    assert format_minutes_label(1050) == "5:30 PM"

from decimal import Decimal

import pytest

from src.attendance_preview.attendance_preview.attendance.config import AttendanceWindowConfig
from src.attendance_preview.attendance_preview.core.exceptions import ConfigurationError


def test_defaults_from_empty_settings():
    config = AttendanceWindowConfig.from_settings({})

    assert config == AttendanceWindowConfig()
    assert config.checkin_start_minutes == 360
    assert config.checkout_lock_minutes == 1050
    assert config.max_paid_hours_per_day == Decimal("11.5")
    assert config.hourly_rate_usdt == Decimal("2")


def test_lock_flags_only_disabled_by_false():
    assert AttendanceWindowConfig.from_settings({"CHECKIN_TIME_LOCK_ENABLED": "false"}).checkin_lock_enabled is False
    assert AttendanceWindowConfig.from_settings({"CHECKOUT_TIME_LOCK_ENABLED": "FALSE"}).checkout_lock_enabled is False
    assert AttendanceWindowConfig.from_settings({"CHECKIN_TIME_LOCK_ENABLED": "0"}).checkin_lock_enabled is True


def test_env_style_values_are_parsed():
    config = AttendanceWindowConfig.from_settings(
        {
            "CHECKIN_START_MINUTES": "420",
            "CHECKIN_END_MINUTES": "600",
            "OVERTIME_START_MINUTES": "1020",
            "CHECKOUT_LOCK_MINUTES": "1140",
            "MAX_PAID_HOURS": "10",
            "MIN_PAID_HOURS": "4.5",
            "REGULAR_HOURLY_RATE": "2.75",
        }
    )

    assert (config.checkin_start_minutes, config.checkin_end_minutes) == (420, 600)
    assert (config.overtime_start_minutes, config.checkout_lock_minutes) == (1020, 1140)
    assert config.min_paid_hours_per_day == Decimal("4.5")
    assert config.hourly_rate_usdt == Decimal("2.75")


def test_float_values_are_coerced_to_decimal():
    config = AttendanceWindowConfig(hourly_rate_usdt=2.5, max_paid_hours_per_day=11.5)

    assert config.hourly_rate_usdt == Decimal("2.5")
    assert isinstance(config.max_paid_hours_per_day, Decimal)


@pytest.mark.parametrize(
    "settings",
    [
        {"CHECKIN_START_MINUTES": "abc"},
        {"CHECKIN_END_MINUTES": "1500"},
        {"CHECKIN_START_MINUTES": "600", "CHECKIN_END_MINUTES": "500"},
        {"OVERTIME_START_MINUTES": "1100", "CHECKOUT_LOCK_MINUTES": "1050"},
        {"MAX_PAID_HOURS": "-1"},
        {"REGULAR_HOURLY_RATE": "two"},
        {"MIN_PAID_HOURS": "12", "MAX_PAID_HOURS": "11.5"},
    ],
)
def test_invalid_settings_rejected_at_load(settings):
    with pytest.raises(ConfigurationError):
        AttendanceWindowConfig.from_settings(settings)


def test_labels_use_twelve_hour_clock():
    labels = AttendanceWindowConfig().labels()

    assert labels["checkin_start"] == "6:00 AM"
    assert labels["checkout_lock"] == "5:30 PM"

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from ..common.datetime_utils import format_minutes_label
from ..common.validators import parse_decimal, parse_flag, parse_minutes
from ..core import constants as c
from ..core.exceptions import ConfigurationError

_DECIMAL_FIELDS = (
    "max_paid_hours_per_day",
    "min_paid_hours_per_day",
    "hourly_rate_usdt",
    "overtime_hourly_rate_usdt",
)


@dataclass(frozen=True)
class AttendanceWindowConfig:
    """Khung giờ chấm công và tham số xem trước lương.

    Built once at startup and passed explicitly to the engine.
    """

    checkin_start_minutes: int = c.DEFAULT_CHECKIN_START_MINUTES
    checkin_end_minutes: int = c.DEFAULT_CHECKIN_END_MINUTES
    checkout_lock_minutes: int = c.DEFAULT_CHECKOUT_LOCK_MINUTES
    overtime_start_minutes: int = c.DEFAULT_OVERTIME_START_MINUTES
    checkin_lock_enabled: bool = True
    checkout_lock_enabled: bool = True
    max_paid_hours_per_day: Decimal = c.DEFAULT_MAX_PAID_HOURS
    min_paid_hours_per_day: Decimal = c.DEFAULT_MIN_PAID_HOURS
    hourly_rate_usdt: Decimal = c.DEFAULT_HOURLY_RATE_USDT
    overtime_hourly_rate_usdt: Decimal = c.DEFAULT_OVERTIME_HOURLY_RATE_USDT

    def __post_init__(self):
        for name in _DECIMAL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "AttendanceWindowConfig":
        """Build from environment-style settings and validate once."""
        config = cls(
            checkin_start_minutes=parse_minutes(
                settings.get("CHECKIN_START_MINUTES"), "CHECKIN_START_MINUTES", c.DEFAULT_CHECKIN_START_MINUTES
            ),
            checkin_end_minutes=parse_minutes(
                settings.get("CHECKIN_END_MINUTES"), "CHECKIN_END_MINUTES", c.DEFAULT_CHECKIN_END_MINUTES
            ),
            checkout_lock_minutes=parse_minutes(
                settings.get("CHECKOUT_LOCK_MINUTES"), "CHECKOUT_LOCK_MINUTES", c.DEFAULT_CHECKOUT_LOCK_MINUTES
            ),
            overtime_start_minutes=parse_minutes(
                settings.get("OVERTIME_START_MINUTES"), "OVERTIME_START_MINUTES", c.DEFAULT_OVERTIME_START_MINUTES
            ),
            checkin_lock_enabled=parse_flag(settings.get("CHECKIN_TIME_LOCK_ENABLED")),
            checkout_lock_enabled=parse_flag(settings.get("CHECKOUT_TIME_LOCK_ENABLED")),
            max_paid_hours_per_day=parse_decimal(settings.get("MAX_PAID_HOURS"), "MAX_PAID_HOURS", c.DEFAULT_MAX_PAID_HOURS),
            min_paid_hours_per_day=parse_decimal(settings.get("MIN_PAID_HOURS"), "MIN_PAID_HOURS", c.DEFAULT_MIN_PAID_HOURS),
            hourly_rate_usdt=parse_decimal(
                settings.get("REGULAR_HOURLY_RATE"), "REGULAR_HOURLY_RATE", c.DEFAULT_HOURLY_RATE_USDT
            ),
            overtime_hourly_rate_usdt=parse_decimal(
                settings.get("OVERTIME_HOURLY_RATE"), "OVERTIME_HOURLY_RATE", c.DEFAULT_OVERTIME_HOURLY_RATE_USDT
            ),
        )
        config.validate()
        return config

    def validate(self) -> None:
        for name in ("checkin_start_minutes", "checkin_end_minutes", "checkout_lock_minutes", "overtime_start_minutes"):
            value = getattr(self, name)
            if not 0 <= value <= c.MINUTES_PER_DAY:
                raise ConfigurationError(f"{name} phải nằm trong [0, {c.MINUTES_PER_DAY}]: {value}")

        if self.checkin_end_minutes < self.checkin_start_minutes:
            raise ConfigurationError("Giờ kết thúc check-in phải sau giờ bắt đầu check-in")
        if self.checkout_lock_minutes < self.overtime_start_minutes:
            raise ConfigurationError("Giờ khóa check-out không được trước giờ bắt đầu tăng ca")

        for name in _DECIMAL_FIELDS:
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} phải là số không âm")
        if self.min_paid_hours_per_day > self.max_paid_hours_per_day:
            raise ConfigurationError("Số giờ tối thiểu không được lớn hơn số giờ tối đa được tính lương")

    def labels(self) -> dict:
        return {
            "checkin_start": format_minutes_label(self.checkin_start_minutes),
            "checkin_end": format_minutes_label(self.checkin_end_minutes),
            "checkout_lock": format_minutes_label(self.checkout_lock_minutes),
            "overtime_start": format_minutes_label(self.overtime_start_minutes),
        }

    def to_dict(self) -> dict:
        return {
            "checkin_start_minutes": self.checkin_start_minutes,
            "checkin_end_minutes": self.checkin_end_minutes,
            "checkout_lock_minutes": self.checkout_lock_minutes,
            "overtime_start_minutes": self.overtime_start_minutes,
            "checkin_lock_enabled": self.checkin_lock_enabled,
            "checkout_lock_enabled": self.checkout_lock_enabled,
            "max_paid_hours_per_day": str(self.max_paid_hours_per_day),
            "min_paid_hours_per_day": str(self.min_paid_hours_per_day),
            "hourly_rate_usdt": str(self.hourly_rate_usdt),
            "overtime_hourly_rate_usdt": str(self.overtime_hourly_rate_usdt),
            "labels": self.labels(),
        }

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.datetime_utils import format_minutes_clock, minutes_of, normalize_minutes, parse_time_of_day
from ..core.constants import CENT
from ..core.enums import MissedCheckoutStatus


@dataclass(frozen=True)
class TimeOfDay:
    """Minutes since midnight, always normalized into [0, 1440)."""

    minutes: int

    def __post_init__(self):
        object.__setattr__(self, "minutes", normalize_minutes(self.minutes))

    @classmethod
    def parse(cls, value: str) -> "TimeOfDay":
        return cls(parse_time_of_day(value))

    @classmethod
    def of(cls, value: datetime | time) -> "TimeOfDay":
        return cls(minutes_of(value))

    def __str__(self) -> str:
        return format_minutes_clock(self.minutes)


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công của một nhân viên trong một ngày."""

    work_date: date
    check_in_time: Optional[TimeOfDay] = None
    check_out_time: Optional[TimeOfDay] = None
    missed_checkout_status: MissedCheckoutStatus = MissedCheckoutStatus.NOT_APPLICABLE
    # Hours confirmed by an admin when approving a missed-checkout report.
    confirmed_hours: Optional[Decimal] = None

    @property
    def approved_late_checkout(self) -> bool:
        return self.missed_checkout_status == MissedCheckoutStatus.APPROVED

    @property
    def is_completed(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is not None


@dataclass(frozen=True)
class WindowEvaluation:
    can_check_in: bool
    can_check_out: bool
    is_overtime: bool
    is_locked: bool
    should_show_late_checkin_warning: bool
    effective_worked_hours: Decimal
    preview_pay_usdt: Decimal

    def to_dict(self) -> dict:
        return {
            "can_check_in": self.can_check_in,
            "can_check_out": self.can_check_out,
            "is_overtime": self.is_overtime,
            "is_locked": self.is_locked,
            "should_show_late_checkin_warning": self.should_show_late_checkin_warning,
            "effective_worked_hours": f"{self.effective_worked_hours.quantize(CENT, rounding=ROUND_HALF_UP)}",
            "preview_pay_usdt": f"{self.preview_pay_usdt.quantize(CENT, rounding=ROUND_HALF_UP)}",
        }

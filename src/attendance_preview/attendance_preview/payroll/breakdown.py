from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ..attendance.config import AttendanceWindowConfig
from ..attendance.engine import Clock, effective_worked_hours
from ..attendance.model import TimeOfDay
from ..core.constants import CENT


@dataclass(frozen=True)
class PayBreakdown:
    regular_hours: Decimal
    overtime_hours: Decimal
    regular_pay: Decimal
    overtime_pay: Decimal

    @property
    def total_hours(self) -> Decimal:
        return self.regular_hours + self.overtime_hours

    @property
    def total_pay(self) -> Decimal:
        return self.regular_pay + self.overtime_pay

    def to_dict(self) -> dict:
        return {
            "regular_hours": f"{self.regular_hours.quantize(CENT, rounding=ROUND_HALF_UP)}",
            "overtime_hours": f"{self.overtime_hours.quantize(CENT, rounding=ROUND_HALF_UP)}",
            "regular_pay": f"{self.regular_pay.quantize(CENT, rounding=ROUND_HALF_UP)}",
            "overtime_pay": f"{self.overtime_pay.quantize(CENT, rounding=ROUND_HALF_UP)}",
            "total_pay": f"{self.total_pay.quantize(CENT, rounding=ROUND_HALF_UP)}",
        }


_ZERO = Decimal("0.00")


def pay_breakdown(check_in_time: Clock, check_out_time: Clock, config: AttendanceWindowConfig) -> PayBreakdown:
    """Split a completed day into regular and overtime hours and pay.

    Overtime is the part of the span inside [overtime start, checkout lock];
    the whole day pays nothing below ``min_paid_hours_per_day``.
    """
    start = TimeOfDay(check_in_time) if isinstance(check_in_time, int) else check_in_time
    end = TimeOfDay(check_out_time) if isinstance(check_out_time, int) else check_out_time

    total_hours = effective_worked_hours(start, end, config)
    if total_hours < config.min_paid_hours_per_day:
        return PayBreakdown(regular_hours=total_hours, overtime_hours=_ZERO, regular_pay=_ZERO, overtime_pay=_ZERO)

    capped_end = min(end.minutes, config.checkout_lock_minutes)
    overtime_minutes = max(0, capped_end - max(start.minutes, config.overtime_start_minutes))
    overtime_hours = min(Decimal(overtime_minutes) / Decimal(60), total_hours).quantize(CENT, rounding=ROUND_HALF_UP)
    regular_hours = max(_ZERO, total_hours - overtime_hours)

    return PayBreakdown(
        regular_hours=regular_hours,
        overtime_hours=overtime_hours,
        regular_pay=regular_hours * config.hourly_rate_usdt,
        overtime_pay=overtime_hours * config.overtime_hourly_rate_usdt,
    )

from __future__ import annotations

from decimal import Decimal

from .base import PayCalculator
from ...attendance.config import AttendanceWindowConfig


class StandardPayCalculator(PayCalculator):
    """Standard rule: hours * rate, nothing below the daily minimum."""

    def preview_pay(self, worked_hours: Decimal, config: AttendanceWindowConfig) -> Decimal:
        if worked_hours < config.min_paid_hours_per_day:
            return Decimal("0")
        return worked_hours * config.hourly_rate_usdt

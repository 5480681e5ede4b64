from __future__ import annotations

from decimal import Decimal

from .base import PayCalculator
from ...attendance.config import AttendanceWindowConfig
from ...core.constants import HALF_PAY_FACTOR


class HalfPayCalculator(PayCalculator):
    """Approved missed-checkout report: 50% pay, daily minimum not applied."""

    def preview_pay(self, worked_hours: Decimal, config: AttendanceWindowConfig) -> Decimal:
        return worked_hours * config.hourly_rate_usdt * HALF_PAY_FACTOR

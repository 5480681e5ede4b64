from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...attendance.config import AttendanceWindowConfig


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for the daily pay preview)."""

    @abstractmethod
    def preview_pay(self, worked_hours: Decimal, config: AttendanceWindowConfig) -> Decimal:
        raise NotImplementedError

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..attendance import engine
from ..attendance.config import AttendanceWindowConfig
from ..attendance.model import AttendanceRecord
from ..core.constants import CENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistorySummary:
    total_hours: Decimal
    total_salary: Decimal
    working_days: int
    avg_hours: Decimal

    def to_dict(self) -> dict:
        return {
            "total_hours": f"{self.total_hours}",
            "total_salary": f"{self.total_salary}",
            "working_days": self.working_days,
            "avg_hours": f"{self.avg_hours}",
        }


class PayrollSummaryService:
    """Thống kê lịch sử chấm công: chỉ tính các ngày đã check-in và check-out."""

    def __init__(self, config: AttendanceWindowConfig):
        self._config = config

    def summarize(self, records: Iterable[AttendanceRecord]) -> HistorySummary:
        total_hours = Decimal("0")
        total_salary = Decimal("0")
        working_days = 0

        for record in records:
            if not record.is_completed:
                continue
            evaluation = engine.evaluate(record.check_out_time, record, self._config)
            total_hours += evaluation.effective_worked_hours
            total_salary += evaluation.preview_pay_usdt
            working_days += 1

        avg_hours = total_hours / working_days if working_days else Decimal("0")
        logger.debug("Summarized %d working days (%s h)", working_days, total_hours)

        return HistorySummary(
            total_hours=total_hours.quantize(CENT, rounding=ROUND_HALF_UP),
            total_salary=total_salary.quantize(CENT, rounding=ROUND_HALF_UP),
            working_days=working_days,
            avg_hours=avg_hours.quantize(CENT, rounding=ROUND_HALF_UP),
        )

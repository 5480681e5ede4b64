from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from . import engine
from .config import AttendanceWindowConfig
from .model import AttendanceRecord, TimeOfDay, WindowEvaluation

logger = logging.getLogger(__name__)


class AttendancePreviewService:
    def __init__(self, config: AttendanceWindowConfig):
        self._config = config

    @property
    def config(self) -> AttendanceWindowConfig:
        return self._config

    def today_record(self, record: Optional[AttendanceRecord], today) -> Optional[AttendanceRecord]:
        """Only a record dated today counts; yesterday's record must not block check-in."""
        if record is None or record.work_date != today:
            return None
        return record

    def preview(self, record: Optional[AttendanceRecord], *, now: datetime | None = None) -> WindowEvaluation:
        now = now or now_local()
        todays = self.today_record(record, now.date())
        if record is not None and todays is None:
            logger.debug("Ignoring attendance record dated %s (today is %s)", record.work_date, now.date())

        evaluation = engine.evaluate(TimeOfDay.of(now), todays, self._config)
        logger.debug(
            "Window at %s: check_in=%s check_out=%s locked=%s hours=%s pay=%s",
            now.strftime("%H:%M"),
            evaluation.can_check_in,
            evaluation.can_check_out,
            evaluation.is_locked,
            evaluation.effective_worked_hours,
            evaluation.preview_pay_usdt,
        )
        return evaluation

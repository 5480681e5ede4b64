from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.config import AttendanceWindowConfig
from .attendance.service import AttendancePreviewService
from .payroll.service import PayrollSummaryService


@dataclass(frozen=True)
class Container:
    window_config: AttendanceWindowConfig

    attendance_preview_service: AttendancePreviewService
    payroll_summary_service: PayrollSummaryService


def build_container(*, window_settings: Mapping[str, Any]) -> Container:
    window_config = AttendanceWindowConfig.from_settings(window_settings)

    return Container(
        window_config=window_config,
        attendance_preview_service=AttendancePreviewService(window_config),
        payroll_summary_service=PayrollSummaryService(window_config),
    )

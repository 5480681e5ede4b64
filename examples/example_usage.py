"""Ví dụ: dùng service layer (không qua Flask).

Xem trước khung giờ chấm công và lương trong ngày cho một bản ghi mẫu.
"""

import importlib
from datetime import datetime

from config import get_settings_module

from src.attendance_preview.attendance_preview.attendance.model import AttendanceRecord, TimeOfDay
from src.attendance_preview.attendance_preview.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(window_settings=settings.ATTENDANCE_WINDOW)

    now = datetime.now().replace(hour=14, minute=0, second=0, microsecond=0)
    record = AttendanceRecord(work_date=now.date(), check_in_time=TimeOfDay.parse("08:00:00"))
    print(container.attendance_preview_service.preview(record, now=now).to_dict())


if __name__ == "__main__":
    main()

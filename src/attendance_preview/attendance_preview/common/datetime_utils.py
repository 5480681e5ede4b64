from __future__ import annotations

import re
from datetime import date, datetime, time

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Ngày không hợp lệ: {value!r}") from exc


def parse_time_of_day(value: str) -> int:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into minutes since midnight.

    Seconds are truncated.
    """
    match = _TIME_RE.match(str(value).strip()) if value is not None else None
    if not match:
        raise ValidationError(f"Giờ không hợp lệ: {value!r}")

    hours, minutes, seconds = int(match.group(1)), int(match.group(2)), int(match.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValidationError(f"Giờ không hợp lệ: {value!r}")
    return hours * 60 + minutes


def normalize_minutes(minutes: int) -> int:
    return int(minutes) % MINUTES_PER_DAY


def minutes_of(value: datetime | time) -> int:
    return value.hour * 60 + value.minute


def format_minutes_clock(minutes: int) -> str:
    minutes = normalize_minutes(minutes)
    return f"{minutes // 60:02d}:{minutes % 60:02d}:00"


def format_minutes_label(minutes: int) -> str:
    """12-hour label, e.g. 1050 -> '5:30 PM'."""
    minutes = normalize_minutes(minutes)
    hours, mins = divmod(minutes, 60)
    suffix = "PM" if hours >= 12 else "AM"
    display_hours = 12 if hours % 12 == 0 else hours % 12
    return f"{display_hours}:{mins:02d} {suffix}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()

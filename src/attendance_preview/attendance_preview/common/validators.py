from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ConfigurationError


def parse_flag(value: Any, default: bool = True) -> bool:
    """Lock flags stay enabled unless explicitly set to 'false'."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() != "false"


def parse_minutes(value: Any, field_name: str, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        minutes = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{field_name} phải là số phút: {value!r}") from exc
    if not 0 <= minutes <= MINUTES_PER_DAY:
        raise ConfigurationError(f"{field_name} phải nằm trong [0, {MINUTES_PER_DAY}]: {minutes}")
    return minutes


def parse_decimal(value: Any, field_name: str, default: Decimal) -> Decimal:
    if value is None or value == "":
        return default
    try:
        number = Decimal(str(value))
    except InvalidOperation as exc:
        raise ConfigurationError(f"{field_name} không hợp lệ: {value!r}") from exc
    if not number.is_finite() or number < 0:
        raise ConfigurationError(f"{field_name} phải là số không âm: {value!r}")
    return number

"""Attendance window engine.

Pure functions deciding, for a clock time and today's attendance record,
which actions are open (check-in, check-out), whether the day is locked or
in the overtime window, and how many hours / how much pay to preview.

The output is advisory: the backend recomputes worked hours and pays out
independently. Nothing here performs I/O, mutates state or raises on
well-formed input; bad data (a check-out before the check-in, clock
minutes outside the day) degrades to zero hours or is wrapped modulo 1440.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..core.constants import CENT
from ..payroll.factory import PayCalculatorFactory
from .config import AttendanceWindowConfig
from .model import AttendanceRecord, TimeOfDay, WindowEvaluation

Clock = Union[TimeOfDay, int]

_pay_calculators = PayCalculatorFactory()


def _minutes(value: Clock) -> int:
    if isinstance(value, TimeOfDay):
        return value.minutes
    return TimeOfDay(value).minutes


def _decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _has_check_in(record: Optional[AttendanceRecord]) -> bool:
    return record is not None and record.check_in_time is not None


def can_check_in(now: Clock, record: Optional[AttendanceRecord], config: AttendanceWindowConfig) -> bool:
    """``record`` is assumed to be today's record (or None).

    With the lock disabled the double check-in guard is left to the caller.
    """
    if not config.checkin_lock_enabled:
        return True
    if _has_check_in(record):
        return False
    return config.checkin_start_minutes <= _minutes(now) <= config.checkin_end_minutes


def can_check_out(now: Clock, config: AttendanceWindowConfig) -> bool:
    """Time rule only; whether a check-in exists is left to the caller."""
    if not config.checkout_lock_enabled:
        return True
    return _minutes(now) < config.checkout_lock_minutes


def is_overtime(now: Clock, config: AttendanceWindowConfig) -> bool:
    # Empty with the defaults (overtime start == checkout lock).
    minutes = _minutes(now)
    return (
        config.checkout_lock_enabled
        and config.overtime_start_minutes <= minutes < config.checkout_lock_minutes
    )


def is_locked(now: Clock, config: AttendanceWindowConfig) -> bool:
    return config.checkout_lock_enabled and _minutes(now) >= config.checkout_lock_minutes


def should_show_late_checkin_warning(
    now: Clock, record: Optional[AttendanceRecord], config: AttendanceWindowConfig
) -> bool:
    return (
        config.checkin_lock_enabled
        and not _has_check_in(record)
        and _minutes(now) > config.checkin_end_minutes
    )


def effective_worked_hours(check_in_time: Clock, check_out_time_or_now: Clock, config: AttendanceWindowConfig) -> Decimal:
    """Hours between check-in and check-out (or now), capped at the checkout lock.

    Negative spans yield 0; the result never exceeds ``max_paid_hours_per_day``
    and is rounded half-up to 2 decimals for display.
    """
    start = _minutes(check_in_time)
    end = min(_minutes(check_out_time_or_now), config.checkout_lock_minutes)

    raw_hours = Decimal(max(end - start, 0)) / Decimal(60)
    hours = min(raw_hours, config.max_paid_hours_per_day)
    return hours.quantize(CENT, rounding=ROUND_HALF_UP)


def preview_pay_usdt(
    worked_hours, config: AttendanceWindowConfig, approved_late_checkout: bool = False
) -> Decimal:
    calculator = _pay_calculators.for_flag(approved_late_checkout)
    return calculator.preview_pay(_decimal(worked_hours), config)


def _worked_hours_for(now: Clock, record: Optional[AttendanceRecord], config: AttendanceWindowConfig) -> Decimal:
    if record is None:
        return Decimal("0.00")

    if record.approved_late_checkout and record.confirmed_hours is not None:
        confirmed = max(_decimal(record.confirmed_hours), Decimal(0))
        return min(confirmed, config.max_paid_hours_per_day).quantize(CENT, rounding=ROUND_HALF_UP)

    if record.check_in_time is None:
        return Decimal("0.00")

    end = record.check_out_time if record.check_out_time is not None else now
    return effective_worked_hours(record.check_in_time, end, config)


def evaluate(now: Clock, record: Optional[AttendanceRecord], config: AttendanceWindowConfig) -> WindowEvaluation:
    hours = _worked_hours_for(now, record, config)
    approved = record is not None and record.approved_late_checkout
    checkout_pending = _has_check_in(record) and record.check_out_time is None

    return WindowEvaluation(
        can_check_in=can_check_in(now, record, config),
        can_check_out=checkout_pending and can_check_out(now, config),
        is_overtime=is_overtime(now, config),
        is_locked=is_locked(now, config),
        should_show_late_checkin_warning=should_show_late_checkin_warning(now, record, config),
        effective_worked_hours=hours,
        preview_pay_usdt=preview_pay_usdt(hours, config, approved),
    )

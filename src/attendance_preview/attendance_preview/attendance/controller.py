from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.enums import MissedCheckoutStatus
from ..core.exceptions import ValidationError
from ..container import Container
from ..payroll.breakdown import pay_breakdown
from .model import AttendanceRecord, TimeOfDay

logger = logging.getLogger(__name__)


def _optional_time(payload: dict, key: str) -> Optional[TimeOfDay]:
    value = payload.get(key)
    if value in (None, ""):
        return None
    return TimeOfDay.parse(value)


def _record_from_payload(payload: dict, *, default_date: date) -> Optional[AttendanceRecord]:
    if not payload.get("check_in_time") and not payload.get("missed_checkout_status"):
        return None

    raw_status = payload.get("missed_checkout_status") or MissedCheckoutStatus.NOT_APPLICABLE.value
    try:
        status = MissedCheckoutStatus(str(raw_status).upper())
    except ValueError as exc:
        raise ValidationError(f"Trạng thái báo quên check-out không hợp lệ: {raw_status!r}") from exc

    confirmed_hours = payload.get("confirmed_hours")
    if confirmed_hours not in (None, ""):
        try:
            confirmed_hours = Decimal(str(confirmed_hours))
        except InvalidOperation as exc:
            raise ValidationError("Số giờ xác nhận không hợp lệ") from exc
        if not confirmed_hours.is_finite() or confirmed_hours < 0:
            raise ValidationError("Số giờ xác nhận không hợp lệ")
    else:
        confirmed_hours = None

    work_date = parse_iso_date(payload["date"]) if payload.get("date") else default_date
    return AttendanceRecord(
        work_date=work_date,
        check_in_time=_optional_time(payload, "check_in_time"),
        check_out_time=_optional_time(payload, "check_out_time"),
        missed_checkout_status=status,
        confirmed_hours=confirmed_hours,
    )


def _now_from_payload(payload: dict) -> datetime:
    now = now_local()
    if payload.get("now"):
        minutes = TimeOfDay.parse(payload["now"]).minutes
        now = now.replace(hour=minutes // 60, minute=minutes % 60, second=0, microsecond=0)
    return now


def _json_object() -> Optional[dict]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        return None
    return payload


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/window", methods=["GET"], endpoint="api_attendance_window")
    def api_attendance_window():
        return jsonify({"success": True, "data": container.window_config.to_dict()})

    @app.route("/api/attendance/preview", methods=["POST"], endpoint="api_attendance_preview")
    def api_attendance_preview():
        """Preview today's check-in/check-out availability and pay (advisory only)."""
        payload = _json_object()
        if payload is None:
            return jsonify({"success": False, "message": "Dữ liệu gửi lên phải là một đối tượng JSON"}), 400
        try:
            now = _now_from_payload(payload)
            record = _record_from_payload(payload, default_date=now.date())
            evaluation = container.attendance_preview_service.preview(record, now=now)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        data = evaluation.to_dict()
        if record is not None and record.is_completed:
            data["pay_breakdown"] = pay_breakdown(record.check_in_time, record.check_out_time, container.window_config).to_dict()
        return jsonify({"success": True, "data": data})

    @app.route("/api/attendance/summary", methods=["POST"], endpoint="api_attendance_summary")
    def api_attendance_summary():
        payload = _json_object()
        if payload is None:
            return jsonify({"success": False, "message": "Dữ liệu gửi lên phải là một đối tượng JSON"}), 400
        items = payload.get("records") or []
        if not isinstance(items, list):
            return jsonify({"success": False, "message": "records phải là một danh sách"}), 400

        try:
            today = now_local().date()
            records = [_record_from_payload(item, default_date=today) for item in items if isinstance(item, dict)]
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        records = [r for r in records if r is not None]
        summary = container.payroll_summary_service.summarize(records)
        logger.info("Attendance summary for %d records", len(records))
        return jsonify({"success": True, "data": summary.to_dict()})

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from src.attendance_preview.attendance_preview.attendance import controller as controller_module
from src.attendance_preview.attendance_preview.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(controller_module, "now_local", lambda: datetime(2026, 3, 2, 9, 15))
    app = create_app()
    return app.test_client()


def test_window_endpoint_exposes_labels(client):
    resp = client.get("/api/attendance/window")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["checkout_lock_minutes"] == 1050
    assert data["labels"]["checkin_end"] == "5:30 PM"


def test_preview_in_progress_day(client):
    resp = client.post("/api/attendance/preview", json={"now": "14:00", "check_in_time": "08:00:00"})

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["can_check_out"] is True
    assert data["effective_worked_hours"] == "6.00"
    assert data["preview_pay_usdt"] == "12.00"
    assert "pay_breakdown" not in data


def test_preview_completed_day_includes_breakdown(client):
    resp = client.post(
        "/api/attendance/preview",
        json={"now": "18:00", "check_in_time": "08:00", "check_out_time": "18:00"},
    )

    data = resp.get_json()["data"]
    assert data["is_locked"] is True
    assert data["preview_pay_usdt"] == "19.00"
    assert data["pay_breakdown"]["overtime_hours"] == "0.00"


def test_preview_without_record_uses_clock(client):
    data = client.post("/api/attendance/preview", json={}).get_json()["data"]

    assert data["can_check_in"] is True
    assert data["preview_pay_usdt"] == "0.00"


def test_preview_approved_missed_checkout(client):
    resp = client.post(
        "/api/attendance/preview",
        json={"now": "10:00", "check_in_time": "09:00", "check_out_time": "10:00", "missed_checkout_status": "approved"},
    )

    assert resp.get_json()["data"]["preview_pay_usdt"] == "1.00"


@pytest.mark.parametrize(
    "payload",
    [
        {"now": "25:00"},
        {"check_in_time": "8h"},
        {"check_in_time": "08:00", "missed_checkout_status": "maybe"},
        {"check_in_time": "08:00", "date": "02/03/2026"},
        {"check_in_time": "08:00", "missed_checkout_status": "APPROVED", "confirmed_hours": "-2"},
        ["08:00"],
        "x",
        42,
    ],
)
def test_preview_rejects_malformed_input(client, payload):
    resp = client.post("/api/attendance/preview", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_summary_endpoint(client):
    resp = client.post(
        "/api/attendance/summary",
        json={
            "records": [
                {"date": "2026-03-02", "check_in_time": "08:00", "check_out_time": "17:00"},
                {"date": "2026-03-03", "check_in_time": "08:00"},
            ]
        },
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"total_hours": "9.00", "total_salary": "18.00", "working_days": 1, "avg_hours": "9.00"}


@pytest.mark.parametrize("payload", [["08:00"], "x"])
def test_summary_rejects_non_object_body(client, payload):
    resp = client.post("/api/attendance/summary", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_summary_logs_only_summarized_records(client, caplog):
    caplog.set_level(logging.INFO)

    client.post(
        "/api/attendance/summary",
        json={
            "records": [
                {"date": "2026-03-02", "check_in_time": "08:00", "check_out_time": "17:00"},
                {"date": "2026-03-03"},
                {"date": "2026-03-04"},
            ]
        },
    )

    assert "Attendance summary for 1 records" in caplog.text

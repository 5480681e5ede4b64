import importlib

from config import get_settings_module
from src.attendance_preview.attendance_preview.container import build_container


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "testing")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"


def test_container_from_testing_settings():
    settings = importlib.import_module("config.testing")
    container = build_container(window_settings=settings.ATTENDANCE_WINDOW)

    assert container.window_config.checkin_lock_enabled is True
    assert container.attendance_preview_service.config is container.window_config

import os

def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def attendance_window_from_env() -> dict:
    """Raw attendance window settings; parsed and validated by AttendanceWindowConfig."""
    names = (
        "CHECKIN_TIME_LOCK_ENABLED",
        "CHECKOUT_TIME_LOCK_ENABLED",
        "CHECKIN_START_MINUTES",
        "CHECKIN_END_MINUTES",
        "CHECKOUT_LOCK_MINUTES",
        "OVERTIME_START_MINUTES",
        "MAX_PAID_HOURS",
        "MIN_PAID_HOURS",
        "REGULAR_HOURLY_RATE",
        "OVERTIME_HOURLY_RATE",
    )
    return {name: os.getenv(name) for name in names if os.getenv(name) is not None}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Fixed defaults so tests do not depend on the host environment.
ATTENDANCE_WINDOW = {
    "CHECKIN_TIME_LOCK_ENABLED": "true",
    "CHECKOUT_TIME_LOCK_ENABLED": "true",
    "CHECKIN_START_MINUTES": "360",
    "CHECKIN_END_MINUTES": "1050",
    "CHECKOUT_LOCK_MINUTES": "1050",
    "OVERTIME_START_MINUTES": "1050",
    "MAX_PAID_HOURS": "11.5",
    "MIN_PAID_HOURS": "5",
    "REGULAR_HOURLY_RATE": "2",
    "OVERTIME_HOURLY_RATE": "4",
}

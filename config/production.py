import os

from config import attendance_window_from_env

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ATTENDANCE_WINDOW = attendance_window_from_env()

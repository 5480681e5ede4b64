import os

from config import attendance_window_from_env

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

ATTENDANCE_WINDOW = attendance_window_from_env()

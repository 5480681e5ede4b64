from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    window_settings = getattr(settings, "ATTENDANCE_WINDOW")

    container = build_container(window_settings=window_settings)
    logger.info(
        "[attendance-preview] settings=%s check-in %s-%s, lock %s",
        settings_module,
        *(container.window_config.labels()[k] for k in ("checkin_start", "checkin_end", "checkout_lock")),
    )

    register_attendance(app, container)

    return app

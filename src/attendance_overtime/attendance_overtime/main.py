from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.logger import get_logger
from .config import get_settings_module
from .container import build_container
from .shifts.controller import register as register_shifts
from .shifts.time_parser import FallbackPolicy


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger = get_logger(__name__, getattr(settings, "LOG_LEVEL", None))

    fallback = None
    if getattr(settings, "USE_SHIFT_FALLBACK", False):
        fallback = FallbackPolicy(
            shift_start=getattr(settings, "DEFAULT_SHIFT_START"),
            shift_end=getattr(settings, "DEFAULT_SHIFT_END"),
        )

    container = build_container(
        department_timings=getattr(settings, "DEPARTMENT_TIMINGS", {}),
        fallback=fallback,
        overtime_rate=float(getattr(settings, "OVERTIME_RATE", 1.0)),
    )
    app.extensions["container"] = container

    register_shifts(app, container)
    register_attendance(app, container)

    logger.info("App created with settings=%s departments=%d", settings_module, len(container.shifts_repo.list_all()))
    return app

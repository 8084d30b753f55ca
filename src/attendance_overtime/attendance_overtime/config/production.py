import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_SHIFT_START = os.getenv("DEFAULT_SHIFT_START", "9:00 AM")
DEFAULT_SHIFT_END = os.getenv("DEFAULT_SHIFT_END", "6:00 PM")

OVERTIME_RATE = float(os.getenv("OVERTIME_RATE", "1.0"))

USE_SHIFT_FALLBACK = bool(int(os.getenv("USE_SHIFT_FALLBACK", "0")))

DEPARTMENT_TIMINGS: dict = {}

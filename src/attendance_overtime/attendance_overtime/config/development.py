import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEFAULT_SHIFT_START = os.getenv("DEFAULT_SHIFT_START", "9:00 AM")
DEFAULT_SHIFT_END = os.getenv("DEFAULT_SHIFT_END", "6:00 PM")

OVERTIME_RATE = float(os.getenv("OVERTIME_RATE", "1.0"))

# Substitute DEFAULT_SHIFT_START/END when a department timing is malformed.
# Off by default so configuration faults surface as errors.
USE_SHIFT_FALLBACK = bool(int(os.getenv("USE_SHIFT_FALLBACK", "0")))

DEPARTMENT_TIMINGS = {
    "operations": {"shift_start": "9:00 AM", "shift_end": "6:00 PM", "nominal_hours": 8},
    "sales": {"shift_start": "9:30 AM", "shift_end": "6:30 PM", "nominal_hours": 8},
    "technical": {"shift_start": "8:00 AM", "shift_end": "5:00 PM", "nominal_hours": 8},
}

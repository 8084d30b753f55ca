SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

DEFAULT_SHIFT_START = "9:00 AM"
DEFAULT_SHIFT_END = "6:00 PM"

OVERTIME_RATE = 1.0

USE_SHIFT_FALLBACK = False

DEPARTMENT_TIMINGS = {
    "operations": {"shift_start": "9:00 AM", "shift_end": "6:00 PM", "nominal_hours": 8},
}

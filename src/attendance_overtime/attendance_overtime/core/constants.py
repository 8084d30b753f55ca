"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60

DEFAULT_SHIFT_START = "9:00 AM"
DEFAULT_SHIFT_END = "6:00 PM"
DEFAULT_NOMINAL_HOURS = 8
DEFAULT_OVERTIME_GRACE_MINUTES = 0

# Flat company-wide multiplier applied to overtime hours.
DEFAULT_OVERTIME_RATE = 1.0

"""12-hour clock parsing for department shift boundaries."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from functools import lru_cache
from typing import Union

from ..common.logger import get_logger
from ..core.constants import DEFAULT_SHIFT_END, DEFAULT_SHIFT_START
from ..core.enums import Meridiem, ShiftBoundary
from ..core.exceptions import FormatError, RangeError, ValidationError
from .model import ShiftConfig

logger = get_logger(__name__)

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)$", re.IGNORECASE)


@lru_cache(maxsize=256)
def parse_clock(value: str) -> time:
    """Parse "H:MM AM|PM" into a time of day.

    Raises FormatError when the string does not match the pattern and
    RangeError when the hour is outside 1-12 or the minute outside 0-59.
    """
    if not isinstance(value, str):
        raise FormatError(f"Time must be in 12-hour format (h:mm AM/PM), got {value!r}")

    match = _CLOCK_PATTERN.fullmatch(value)
    if not match:
        raise FormatError(f"Time must be in 12-hour format (h:mm AM/PM), got {value!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    meridiem = Meridiem(match.group(3).upper())

    if not 1 <= hour <= 12:
        raise RangeError(f"Hour must be between 1 and 12, got {hour} in {value!r}")
    if not 0 <= minute <= 59:
        raise RangeError(f"Minute must be between 0 and 59, got {minute} in {value!r}")

    if meridiem is Meridiem.AM:
        hour24 = 0 if hour == 12 else hour
    else:
        hour24 = 12 if hour == 12 else hour + 12
    return time(hour24, minute)


def parse_time_of_day(value: str, anchor: Union[date, datetime]) -> datetime:
    """Resolve ``value`` onto the calendar day of ``anchor``.

    The time-of-day part of ``anchor`` is ignored; its tzinfo, if any, is kept.
    """
    clock = parse_clock(value)
    tzinfo = anchor.tzinfo if isinstance(anchor, datetime) else None
    day = anchor.date() if isinstance(anchor, datetime) else anchor
    return datetime.combine(day, clock, tzinfo=tzinfo)


def format_clock(value: time) -> str:
    """Render a time of day as "H:MM AM|PM"."""
    meridiem = Meridiem.AM if value.hour < 12 else Meridiem.PM
    hour12 = value.hour % 12 or 12
    return f"{hour12}:{value.minute:02d} {meridiem.value}"


@dataclass(frozen=True)
class FallbackPolicy:
    """Caller-chosen defaults for malformed shift boundaries.

    The boundary is always named explicitly by the caller.
    """

    shift_start: str = DEFAULT_SHIFT_START
    shift_end: str = DEFAULT_SHIFT_END

    def default_for(self, boundary: ShiftBoundary) -> str:
        return self.shift_start if boundary is ShiftBoundary.START else self.shift_end

    def resolve(self, value: str, boundary: ShiftBoundary) -> str:
        """Return ``value`` when it parses, otherwise the default for ``boundary``."""
        try:
            parse_clock(value)
        except ValidationError as exc:
            default = self.default_for(boundary)
            logger.warning("Shift %s %r is invalid (%s); using %s", boundary.value.lower(), value, exc, default)
            return default
        return value

    def apply(self, shift: ShiftConfig) -> ShiftConfig:
        return replace(
            shift,
            shift_start=self.resolve(shift.shift_start, ShiftBoundary.START),
            shift_end=self.resolve(shift.shift_end, ShiftBoundary.END),
        )

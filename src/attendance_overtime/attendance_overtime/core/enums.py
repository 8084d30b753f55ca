from __future__ import annotations

from enum import Enum


class Meridiem(str, Enum):
    """12-hour clock suffix."""

    AM = "AM"
    PM = "PM"


class ShiftBoundary(str, Enum):
    """Which edge of the department shift window a time string describes."""

    START = "START"
    END = "END"


class OvertimeSessionStatus(str, Enum):
    """Lifecycle of a manually logged overtime session."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    LOCKED = "locked"
    PENDING_REVIEW = "PENDING_REVIEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

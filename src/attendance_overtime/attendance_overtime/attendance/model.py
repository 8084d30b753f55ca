from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import floor_minutes, format_duration
from ..core.enums import OvertimeSessionStatus

# Only these statuses are paid; pending, rejected and open sessions are not.
PAYABLE_SESSION_STATUSES = frozenset({OvertimeSessionStatus.COMPLETED, OvertimeSessionStatus.APPROVED})


@dataclass(frozen=True)
class WorkWindow:
    """A worked interval alongside the shift window anchored to the check-in day."""

    check_in: datetime
    reference_now: datetime
    shift_start_absolute: datetime
    shift_end_absolute: datetime


@dataclass(frozen=True)
class WorkBreakdown:
    """Regular and overtime minutes for one attendance session."""

    regular_minutes: int
    early_arrival_overtime_minutes: int
    late_departure_overtime_minutes: int

    @property
    def overtime_minutes(self) -> int:
        return self.early_arrival_overtime_minutes + self.late_departure_overtime_minutes

    @property
    def total_minutes(self) -> int:
        return self.regular_minutes + self.overtime_minutes

    @property
    def is_overtime(self) -> bool:
        return self.overtime_minutes > 0

    def to_dict(self) -> dict:
        return {
            "regular_minutes": self.regular_minutes,
            "early_arrival_overtime_minutes": self.early_arrival_overtime_minutes,
            "late_departure_overtime_minutes": self.late_departure_overtime_minutes,
            "overtime_minutes": self.overtime_minutes,
            "total_minutes": self.total_minutes,
            "is_overtime": self.is_overtime,
            "regular_hours": format_duration(self.regular_minutes),
            "overtime_hours": format_duration(self.overtime_minutes),
            "total_hours": format_duration(self.total_minutes),
        }


@dataclass(frozen=True)
class OvertimeSession:
    """Manually started/ended overtime, logged separately from check-in/check-out."""

    session_id: str
    start: datetime
    end: Optional[datetime]
    status: OvertimeSessionStatus = OvertimeSessionStatus.COMPLETED

    @property
    def minutes(self) -> int:
        if self.end is None:
            return 0
        return max(0, floor_minutes(self.end - self.start))

    @property
    def is_payable(self) -> bool:
        return self.end is not None and self.status in PAYABLE_SESSION_STATUSES

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "start": self.start.isoformat(),
            "end": self.end.isoformat() if self.end else None,
            "status": self.status.value,
            "minutes": self.minutes,
        }


@dataclass(frozen=True)
class FinalizedAttendance:
    """Read-model for a checked-out session, consumed by payroll."""

    user_id: str
    department_id: str
    work_date: date
    check_in: datetime
    check_out: datetime
    breakdown: WorkBreakdown
    note: Optional[str] = None
    ot_sessions: tuple[OvertimeSession, ...] = ()

    @property
    def manual_overtime_minutes(self) -> int:
        return sum(s.minutes for s in self.ot_sessions if s.is_payable)

    @property
    def total_overtime_minutes(self) -> int:
        """Early/late overtime plus payable manual sessions."""
        return self.breakdown.overtime_minutes + self.manual_overtime_minutes

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "department_id": self.department_id,
            "work_date": self.work_date.isoformat(),
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "breakdown": self.breakdown.to_dict(),
            "note": self.note,
            "ot_sessions": [s.to_dict() for s in self.ot_sessions],
            "manual_overtime_minutes": self.manual_overtime_minutes,
            "total_overtime_minutes": self.total_overtime_minutes,
        }

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local, same_awareness
from ..common.logger import get_logger
from ..common.validators import require_non_empty
from ..core.exceptions import ConfigurationError, NotFoundError, ValidationError
from ..shifts.model import ShiftConfig
from ..shifts.repository import ShiftConfigRepository
from ..shifts.time_parser import FallbackPolicy
from .calculator import compute_work_breakdown
from .model import FinalizedAttendance, OvertimeSession, WorkBreakdown

logger = get_logger(__name__)


def _require_same_awareness(check_in: datetime, other: datetime, field_name: str) -> None:
    if not same_awareness(check_in, other):
        raise ValidationError(f"check_in and {field_name} must both include a timezone offset or both omit it")


class WorkingHoursService:
    """Live preview and check-out finalisation of working hours.

    Without a ``fallback`` policy a malformed department timing raises
    ConfigurationError. With one, the policy's defaults are substituted.
    """

    def __init__(
        self,
        shifts: ShiftConfigRepository,
        *,
        fallback: Optional[FallbackPolicy] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._shifts = shifts
        self._fallback = fallback
        self._clock = clock

    def _get_shift(self, department_id: str) -> ShiftConfig:
        department_id = require_non_empty(department_id, "department_id")
        shift = self._shifts.get_for_department(department_id)
        if not shift:
            raise NotFoundError(f"No timing configured for department {department_id!r}")
        if self._fallback:
            return self._fallback.apply(shift)
        return shift

    def _compute(self, department_id: str, check_in: datetime, reference_now: datetime) -> WorkBreakdown:
        shift = self._get_shift(department_id)
        try:
            return compute_work_breakdown(check_in, reference_now, shift)
        except ConfigurationError:
            logger.error("Department %s timing is misconfigured: %r - %r", department_id, shift.shift_start, shift.shift_end)
            raise

    def preview(self, department_id: str, check_in: datetime, *, now: Optional[datetime] = None) -> WorkBreakdown:
        """Breakdown for a session that is still open, as of ``now``."""
        if now is None:
            now = self._clock()
            if check_in.tzinfo is not None and now.tzinfo is None:
                # Naive clock readings are local time.
                now = now.astimezone(check_in.tzinfo)
        _require_same_awareness(check_in, now, "now")
        if now < check_in:
            raise ValidationError("Check-in time is in the future")
        return self._compute(department_id, check_in, now)

    def finalize(
        self,
        *,
        user_id: str,
        department_id: str,
        check_in: datetime,
        check_out: datetime,
        note: Optional[str] = None,
        ot_sessions: Sequence[OvertimeSession] = (),
    ) -> FinalizedAttendance:
        user_id = require_non_empty(user_id, "user_id")
        _require_same_awareness(check_in, check_out, "check_out")
        if check_out < check_in:
            raise ValidationError("Check-out time is before check-in time")
        for s in ot_sessions:
            _require_same_awareness(check_in, s.start, "overtime session start")
            if s.end is not None:
                _require_same_awareness(check_in, s.end, "overtime session end")
                if s.end < s.start:
                    raise ValidationError(f"Overtime session {s.session_id} ends before it starts")

        breakdown = self._compute(department_id, check_in, check_out)
        record = FinalizedAttendance(
            user_id=user_id,
            department_id=department_id,
            work_date=check_in.date(),
            check_in=check_in,
            check_out=check_out,
            breakdown=breakdown,
            note=note,
            ot_sessions=tuple(ot_sessions),
        )
        logger.info(
            "Finalized attendance user=%s dept=%s regular=%dm overtime=%dm manual=%dm",
            user_id,
            department_id,
            breakdown.regular_minutes,
            breakdown.overtime_minutes,
            record.manual_overtime_minutes,
        )
        return record

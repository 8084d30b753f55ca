from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping, Optional

from ..attendance.model import FinalizedAttendance
from ..common.datetime_utils import format_duration
from ..common.logger import get_logger
from ..core.constants import DEFAULT_NOMINAL_HOURS, MINUTES_PER_HOUR
from ..core.exceptions import ValidationError
from ..shifts.repository import ShiftConfigRepository
from .calculator.base import OvertimePayCalculator
from .calculator.flat_rate_calculator import FlatRateOvertimeCalculator, hourly_rate

logger = get_logger(__name__)


@dataclass(frozen=True)
class OvertimeSummary:
    rows: list[dict]
    total_overtime_minutes: int


class OvertimePayrollService:
    def __init__(
        self,
        *,
        calculator: Optional[OvertimePayCalculator] = None,
        shifts: Optional[ShiftConfigRepository] = None,
    ):
        self._calculator = calculator or FlatRateOvertimeCalculator()
        self._shifts = shifts

    def _nominal_hours(self, department_id: str) -> float:
        shift = self._shifts.get_for_department(department_id) if self._shifts else None
        return shift.nominal_hours if shift else DEFAULT_NOMINAL_HOURS

    def build_overtime_summary(
        self,
        records: Iterable[FinalizedAttendance],
        *,
        start: date,
        end: date,
        daily_salaries: Optional[Mapping[str, float]] = None,
    ) -> OvertimeSummary:
        """Sum overtime per employee for work dates within [start, end].

        Overtime is early/late minutes plus payable manual sessions. The
        hourly rate is the daily salary over the department's nominal hours.
        """
        if end < start:
            raise ValidationError("Pay period end is before its start")
        daily_salaries = daily_salaries or {}

        summary_map: dict[str, dict] = {}
        for r in records:
            if not start <= r.work_date <= end:
                continue
            s = summary_map.get(r.user_id)
            if not s:
                s = {"user_id": r.user_id, "department_id": r.department_id, "days": 0, "auto": 0, "manual": 0}
                summary_map[r.user_id] = s
            s["days"] += 1
            s["auto"] += r.breakdown.overtime_minutes
            s["manual"] += r.manual_overtime_minutes

        rows = []
        for s in summary_map.values():
            minutes = s["auto"] + s["manual"]
            salary = daily_salaries.get(s["user_id"])
            if salary is None:
                logger.warning("No daily salary for user %s; overtime pay set to 0", s["user_id"])
                rate = 0.0
                pay = 0
            else:
                rate = hourly_rate(salary, self._nominal_hours(s["department_id"]))
                pay = self._calculator.overtime_pay(overtime_minutes=minutes, hourly_rate=rate)

            rows.append(
                {
                    "user_id": s["user_id"],
                    "days": s["days"],
                    "auto_overtime_minutes": s["auto"],
                    "manual_overtime_minutes": s["manual"],
                    "overtime_minutes": minutes,
                    "overtime_hours": round(minutes / MINUTES_PER_HOUR, 2),
                    "overtime_display": format_duration(minutes),
                    "hourly_rate": round(rate, 2),
                    "overtime_pay": pay,
                }
            )

        rows.sort(key=lambda x: x["overtime_minutes"], reverse=True)
        return OvertimeSummary(rows=rows, total_overtime_minutes=sum(x["overtime_minutes"] for x in rows))

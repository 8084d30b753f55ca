from datetime import date, datetime

import pytest

from src.attendance_overtime.attendance_overtime.attendance.model import (
    FinalizedAttendance,
    OvertimeSession,
    WorkBreakdown,
)
from src.attendance_overtime.attendance_overtime.core.enums import OvertimeSessionStatus
from src.attendance_overtime.attendance_overtime.core.exceptions import ValidationError
from src.attendance_overtime.attendance_overtime.payroll.service import OvertimePayrollService
from src.attendance_overtime.attendance_overtime.shifts.memory_shift_repository import InMemoryShiftConfigRepository
from src.attendance_overtime.attendance_overtime.shifts.model import ShiftConfig


def record(user_id: str, day: int, early: int, late: int, sessions=(), department_id: str = "ops") -> FinalizedAttendance:
    return FinalizedAttendance(
        user_id=user_id,
        department_id=department_id,
        work_date=date(2025, 1, day),
        check_in=datetime(2025, 1, day, 9, 0),
        check_out=datetime(2025, 1, day, 18, 0),
        breakdown=WorkBreakdown(regular_minutes=540, early_arrival_overtime_minutes=early, late_departure_overtime_minutes=late),
        ot_sessions=tuple(sessions),
    )


def session(day: int, start_hour: int, end_hour: int, status=OvertimeSessionStatus.APPROVED) -> OvertimeSession:
    return OvertimeSession(
        session_id=f"ot-{day}-{start_hour}",
        start=datetime(2025, 1, day, start_hour, 0),
        end=datetime(2025, 1, day, end_hour, 0),
        status=status,
    )


def test_summary_sums_overtime_per_employee_within_period():
    records = [
        record("a", 2, 30, 60),
        record("a", 3, 0, 45),
        record("b", 2, 0, 20),
        record("a", 31, 0, 600),
    ]

    summary = OvertimePayrollService().build_overtime_summary(
        records,
        start=date(2025, 1, 1),
        end=date(2025, 1, 15),
        daily_salaries={"a": 800.0, "b": 480.0},
    )

    assert summary.total_overtime_minutes == 155
    a, b = summary.rows
    assert a == {
        "user_id": "a",
        "days": 2,
        "auto_overtime_minutes": 135,
        "manual_overtime_minutes": 0,
        "overtime_minutes": 135,
        "overtime_hours": 2.25,
        "overtime_display": "2h 15m",
        "hourly_rate": 100.0,
        "overtime_pay": 225,
    }
    assert b["user_id"] == "b"
    assert b["overtime_pay"] == 20


def test_manual_session_adds_to_regular_checkout():
    summary = OvertimePayrollService().build_overtime_summary(
        [record("a", 6, 0, 0, sessions=[session(6, 19, 21)])],
        start=date(2025, 1, 1),
        end=date(2025, 1, 31),
        daily_salaries={"a": 800.0},
    )

    row = summary.rows[0]
    assert row["auto_overtime_minutes"] == 0
    assert row["manual_overtime_minutes"] == 120
    assert row["overtime_hours"] == 2.0
    assert row["overtime_pay"] == 200


def test_combined_automatic_and_manual_overtime():
    sessions = [
        session(6, 19, 21),
        session(6, 21, 22, OvertimeSessionStatus.COMPLETED),
        session(6, 22, 23, OvertimeSessionStatus.PENDING_REVIEW),
        session(6, 23, 23, OvertimeSessionStatus.REJECTED),
    ]
    summary = OvertimePayrollService().build_overtime_summary(
        [record("a", 6, 60, 0, sessions=sessions)],
        start=date(2025, 1, 1),
        end=date(2025, 1, 31),
        daily_salaries={"a": 800.0},
    )

    row = summary.rows[0]
    assert row["auto_overtime_minutes"] == 60
    assert row["manual_overtime_minutes"] == 180
    assert row["overtime_minutes"] == 240
    assert row["overtime_pay"] == 400


def test_hourly_rate_uses_department_nominal_hours():
    shifts = InMemoryShiftConfigRepository(
        [ShiftConfig(shift_start="9:00 AM", shift_end="1:00 PM", nominal_hours=4, department_id="part-time")]
    )
    summary = OvertimePayrollService(shifts=shifts).build_overtime_summary(
        [record("p", 6, 0, 60, department_id="part-time")],
        start=date(2025, 1, 1),
        end=date(2025, 1, 31),
        daily_salaries={"p": 400.0},
    )

    assert summary.rows[0]["hourly_rate"] == 100.0
    assert summary.rows[0]["overtime_pay"] == 100


def test_missing_daily_salary_pays_zero():
    summary = OvertimePayrollService().build_overtime_summary(
        [record("c", 5, 60, 0)],
        start=date(2025, 1, 1),
        end=date(2025, 1, 31),
    )
    assert summary.rows[0]["overtime_pay"] == 0
    assert summary.rows[0]["overtime_hours"] == 1.0


def test_period_must_be_ordered():
    with pytest.raises(ValidationError):
        OvertimePayrollService().build_overtime_summary([], start=date(2025, 2, 1), end=date(2025, 1, 1))

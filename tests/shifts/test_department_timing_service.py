import pytest

from src.attendance_overtime.attendance_overtime.core.exceptions import (
    FormatError,
    NotFoundError,
    RangeError,
    ValidationError,
)
from src.attendance_overtime.attendance_overtime.shifts.memory_shift_repository import InMemoryShiftConfigRepository
from src.attendance_overtime.attendance_overtime.shifts.model import ShiftConfig
from src.attendance_overtime.attendance_overtime.shifts.service import DepartmentTimingService, validate_shift_config


def make_service():
    repo = InMemoryShiftConfigRepository.from_mapping(
        {"sales": {"shift_start": "9:30 AM", "shift_end": "6:30 PM", "nominal_hours": 8}}
    )
    return DepartmentTimingService(repo), repo


def test_get_timing_returns_seeded_department():
    service, _ = make_service()
    shift = service.get_timing("sales")
    assert shift == ShiftConfig(shift_start="9:30 AM", shift_end="6:30 PM", nominal_hours=8.0, department_id="sales")


def test_get_timing_unknown_department():
    service, _ = make_service()
    with pytest.raises(NotFoundError):
        service.get_timing("hr")


def test_update_timing_saves_valid_config():
    service, repo = make_service()
    shift = service.update_timing("hr", {"shift_start": "10:00 AM", "shift_end": "7:00 PM", "nominal_hours": 8, "overtime_grace_minutes": 15})

    assert repo.get_for_department("hr") == shift
    assert shift.overtime_grace_minutes == 15
    assert [s.department_id for s in service.list_timings()] == ["hr", "sales"]


@pytest.mark.parametrize(
    "data, error",
    [
        ({"shift_start": "10 AM", "shift_end": "7:00 PM"}, FormatError),
        ({"shift_start": "13:00 PM", "shift_end": "7:00 PM"}, RangeError),
        ({"shift_end": "7:00 PM"}, ValidationError),
        ({"shift_start": "10:00 AM", "shift_end": "7:00 PM", "nominal_hours": 0}, ValidationError),
        ({"shift_start": "10:00 AM", "shift_end": "7:00 PM", "nominal_hours": 25}, ValidationError),
        ({"shift_start": "10:00 AM", "shift_end": "7:00 PM", "overtime_grace_minutes": -5}, ValidationError),
        ({"shift_start": "10:00 AM", "shift_end": "7:00 PM", "nominal_hours": "eight"}, ValidationError),
        ({"shift_start": "10:00 AM", "shift_end": "7:00 PM", "nominal_hours": "nan"}, ValidationError),
        ({"shift_start": "10:00 AM", "shift_end": "7:00 PM", "nominal_hours": "inf"}, ValidationError),
    ],
)
def test_update_timing_rejects_invalid_config(data, error):
    service, repo = make_service()
    with pytest.raises(error):
        service.update_timing("hr", data)
    assert repo.get_for_department("hr") is None


def test_validate_requires_department():
    with pytest.raises(ValidationError):
        validate_shift_config(ShiftConfig(shift_start="9:00 AM", shift_end="6:00 PM"))


def test_repository_requires_department_id():
    repo = InMemoryShiftConfigRepository()
    with pytest.raises(ValidationError):
        repo.save(ShiftConfig(shift_start="9:00 AM", shift_end="6:00 PM"))


def test_update_timing_stores_canonical_clock_strings():
    service, repo = make_service()
    shift = service.update_timing("hr", {"shift_start": "09:05 am", "shift_end": "6:00PM"})

    assert shift.shift_start == "9:05 AM"
    assert shift.shift_end == "6:00 PM"
    assert repo.get_for_department("hr").shift_start == "9:05 AM"

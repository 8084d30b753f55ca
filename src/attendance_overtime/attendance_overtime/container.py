from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .attendance.service import WorkingHoursService
from .core.constants import DEFAULT_OVERTIME_RATE
from .payroll.calculator.flat_rate_calculator import FlatRateOvertimeCalculator
from .payroll.service import OvertimePayrollService
from .shifts.memory_shift_repository import InMemoryShiftConfigRepository
from .shifts.service import DepartmentTimingService
from .shifts.time_parser import FallbackPolicy


@dataclass(frozen=True)
class Container:
    shifts_repo: InMemoryShiftConfigRepository

    department_timing_service: DepartmentTimingService
    working_hours_service: WorkingHoursService
    overtime_payroll_service: OvertimePayrollService


def build_container(
    *,
    department_timings: Mapping[str, dict],
    fallback: Optional[FallbackPolicy] = None,
    overtime_rate: float = DEFAULT_OVERTIME_RATE,
) -> Container:
    shifts_repo = InMemoryShiftConfigRepository.from_mapping(department_timings)

    department_timing_service = DepartmentTimingService(shifts_repo)
    working_hours_service = WorkingHoursService(shifts_repo, fallback=fallback)
    overtime_payroll_service = OvertimePayrollService(
        calculator=FlatRateOvertimeCalculator(overtime_rate),
        shifts=shifts_repo,
    )

    return Container(
        shifts_repo=shifts_repo,
        department_timing_service=department_timing_service,
        working_hours_service=working_hours_service,
        overtime_payroll_service=overtime_payroll_service,
    )

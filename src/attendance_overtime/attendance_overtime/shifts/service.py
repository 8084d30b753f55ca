from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..common.logger import get_logger
from ..common.validators import require_non_empty, require_non_negative, require_positive
from ..core.exceptions import NotFoundError, ValidationError
from .model import ShiftConfig
from .repository import ShiftConfigRepository
from .time_parser import format_clock, parse_clock

logger = get_logger(__name__)


def validate_shift_config(shift: ShiftConfig) -> ShiftConfig:
    """Upstream validation for department timings.

    Returns the config with both boundaries in canonical "H:MM AM|PM" form.

    Raises FormatError/RangeError for bad clock strings and ValidationError
    for the numeric fields.
    """
    require_non_empty(shift.department_id or "", "department_id")
    start = parse_clock(require_non_empty(shift.shift_start, "shift_start"))
    end = parse_clock(require_non_empty(shift.shift_end, "shift_end"))
    require_positive(shift.nominal_hours, "nominal_hours", maximum=24)
    require_non_negative(shift.overtime_grace_minutes, "overtime_grace_minutes")
    return replace(shift, shift_start=format_clock(start), shift_end=format_clock(end))


class DepartmentTimingService:
    def __init__(self, shifts: ShiftConfigRepository):
        self._shifts = shifts

    def list_timings(self) -> Sequence[ShiftConfig]:
        return self._shifts.list_all()

    def get_timing(self, department_id: str) -> ShiftConfig:
        shift = self._shifts.get_for_department(department_id)
        if not shift:
            raise NotFoundError(f"No timing configured for department {department_id!r}")
        return shift

    def update_timing(self, department_id: str, data: dict) -> ShiftConfig:
        try:
            shift = ShiftConfig.from_dict(data, department_id=department_id)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid department timing: {exc}") from exc

        shift = validate_shift_config(shift)
        self._shifts.save(shift)
        logger.info("Department %s timing set to %s - %s", department_id, shift.shift_start, shift.shift_end)
        return shift

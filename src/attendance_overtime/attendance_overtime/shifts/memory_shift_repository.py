from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..core.exceptions import ValidationError
from .model import ShiftConfig


class InMemoryShiftConfigRepository:
    """Department timings keyed by department id."""

    def __init__(self, shifts: Optional[Sequence[ShiftConfig]] = None):
        self._by_department: dict[str, ShiftConfig] = {}
        for shift in shifts or ():
            self.save(shift)

    @classmethod
    def from_mapping(cls, timings: Mapping[str, dict]) -> "InMemoryShiftConfigRepository":
        return cls([ShiftConfig.from_dict(data, department_id=dept) for dept, data in timings.items()])

    def list_all(self) -> Sequence[ShiftConfig]:
        return sorted(self._by_department.values(), key=lambda s: s.department_id or "")

    def get_for_department(self, department_id: str) -> Optional[ShiftConfig]:
        return self._by_department.get(department_id)

    def save(self, shift: ShiftConfig) -> None:
        if not shift.department_id:
            raise ValidationError("department_id must not be empty")
        self._by_department[shift.department_id] = shift

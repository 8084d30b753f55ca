from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.constants import DEFAULT_NOMINAL_HOURS, DEFAULT_OVERTIME_GRACE_MINUTES


@dataclass(frozen=True)
class ShiftConfig:
    """Domain entity: a department's shift window.

    ``shift_start``/``shift_end`` are 12-hour clock strings such as "9:00 AM".
    ``nominal_hours`` is informational only. ``overtime_grace_minutes`` is
    reserved and is not consumed by the working-time calculation.
    """

    shift_start: str
    shift_end: str
    nominal_hours: float = DEFAULT_NOMINAL_HOURS
    overtime_grace_minutes: int = DEFAULT_OVERTIME_GRACE_MINUTES
    department_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict, *, department_id: Optional[str] = None) -> "ShiftConfig":
        return cls(
            shift_start=str(data.get("shift_start") or ""),
            shift_end=str(data.get("shift_end") or ""),
            nominal_hours=float(data.get("nominal_hours", DEFAULT_NOMINAL_HOURS)),
            overtime_grace_minutes=int(data.get("overtime_grace_minutes", DEFAULT_OVERTIME_GRACE_MINUTES)),
            department_id=department_id or data.get("department_id"),
        )

    def to_dict(self) -> dict:
        return asdict(self)

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ShiftConfig


class ShiftConfigRepository(Protocol):
    def list_all(self) -> Sequence[ShiftConfig]:
        raise NotImplementedError

    def get_for_department(self, department_id: str) -> Optional[ShiftConfig]:
        raise NotImplementedError

    def save(self, shift: ShiftConfig) -> None:
        raise NotImplementedError

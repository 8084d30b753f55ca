from __future__ import annotations

from abc import ABC, abstractmethod


class OvertimePayCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime pay)."""

    @abstractmethod
    def overtime_pay(self, *, overtime_minutes: int, hourly_rate: float) -> int:
        raise NotImplementedError

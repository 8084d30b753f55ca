from __future__ import annotations

from ...common.validators import require_positive
from ...core.constants import DEFAULT_OVERTIME_RATE, MINUTES_PER_HOUR
from .base import OvertimePayCalculator


def hourly_rate(daily_salary: float, nominal_hours: float) -> float:
    """Hourly rate derived from a daily salary and the department's nominal hours."""
    require_positive(nominal_hours, "nominal_hours")
    return daily_salary / nominal_hours


class FlatRateOvertimeCalculator(OvertimePayCalculator):
    """Flat rule: (minutes / 60) * hourly rate * multiplier, rounded to whole currency units."""

    def __init__(self, rate: float = DEFAULT_OVERTIME_RATE):
        self.rate = float(require_positive(rate, "rate"))

    def overtime_pay(self, *, overtime_minutes: int, hourly_rate: float) -> int:
        if overtime_minutes <= 0:
            return 0
        hours = overtime_minutes / MINUTES_PER_HOUR
        return round(hours * hourly_rate * self.rate)

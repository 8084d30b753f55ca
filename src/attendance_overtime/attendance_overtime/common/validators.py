from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative(value: int, field_name: str) -> int:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must be zero or greater")
    return value


def require_positive(value: float, field_name: str, *, maximum: float | None = None) -> float:
    if value is None or not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{field_name} must be a finite number greater than zero")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{field_name} must not exceed {maximum}")
    return value

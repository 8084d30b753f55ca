"""Working-time calculation against a department shift window.

Everything here is pure: no I/O, no shared state. Callers may invoke
``compute_work_breakdown`` repeatedly with a moving ``reference_now``
(live preview) or once with the actual check-out time (finalisation).
"""

from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import floor_minutes
from ..common.logger import get_logger
from ..core.exceptions import ConfigurationError, ValidationError
from ..shifts.model import ShiftConfig
from ..shifts.time_parser import parse_time_of_day
from .model import WorkBreakdown, WorkWindow

logger = get_logger(__name__)


def _resolve_boundary(shift: ShiftConfig, field_name: str, check_in: datetime) -> datetime:
    value = getattr(shift, field_name)
    try:
        return parse_time_of_day(value, check_in)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Department {shift.department_id or '?'} has an invalid {field_name}: {exc}",
            field_name=field_name,
        ) from exc


def resolve_work_window(check_in: datetime, reference_now: datetime, shift: ShiftConfig) -> WorkWindow:
    """Anchor the shift window to the calendar day of ``check_in``."""
    window = WorkWindow(
        check_in=check_in,
        reference_now=reference_now,
        shift_start_absolute=_resolve_boundary(shift, "shift_start", check_in),
        shift_end_absolute=_resolve_boundary(shift, "shift_end", check_in),
    )
    if window.shift_end_absolute <= window.shift_start_absolute:
        # Overnight shifts are not wrapped to the next day.
        logger.warning(
            "Shift %s - %s ends before it starts; all worked time counts as overtime",
            shift.shift_start,
            shift.shift_end,
        )
    return window


def compute_work_breakdown(check_in: datetime, reference_now: datetime, shift: ShiftConfig) -> WorkBreakdown:
    """Split the time between ``check_in`` and ``reference_now`` into regular and overtime minutes.

    Precondition: ``reference_now >= check_in``. The result is unspecified
    otherwise.

    Raises:
        ConfigurationError: ``shift.shift_start`` or ``shift.shift_end`` is malformed.
    """
    window = resolve_work_window(check_in, reference_now, shift)
    shift_start = window.shift_start_absolute
    shift_end = window.shift_end_absolute

    # Early overtime stops at the shift start or at reference_now, whichever comes first.
    early_end = min(shift_start, reference_now)
    early = floor_minutes(early_end - check_in) if check_in < early_end else 0

    # Late overtime never starts before the shift start, so it cannot overlap early overtime
    # when the shift end is earlier than the shift start.
    late_start = max(shift_end, shift_start, check_in)
    late = floor_minutes(reference_now - late_start) if reference_now > late_start else 0

    work_start = max(check_in, shift_start)
    work_end = min(reference_now, shift_end)
    regular = max(0, floor_minutes(work_end - work_start))

    breakdown = WorkBreakdown(
        regular_minutes=regular,
        early_arrival_overtime_minutes=early,
        late_departure_overtime_minutes=late,
    )
    logger.debug(
        "Work breakdown %s -> %s: regular=%d early=%d late=%d",
        check_in.isoformat(),
        reference_now.isoformat(),
        regular,
        early,
        late,
    )
    return breakdown

from __future__ import annotations

from datetime import datetime, timedelta

from ..core.constants import MINUTES_PER_HOUR


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp (YYYY-MM-DDTHH:MM[:SS][+HH:MM|Z]) into datetime."""
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can inject a fixed clock.
    """
    return datetime.now()


def floor_minutes(duration: timedelta) -> int:
    """Whole minutes in ``duration``, truncated toward zero."""
    return int(duration.total_seconds() / 60)


def format_duration(minutes: int) -> str:
    """Render a minute count as ``"{h}h {m}m"``."""
    return f"{minutes // MINUTES_PER_HOUR}h {minutes % MINUTES_PER_HOUR}m"


def same_awareness(first: datetime, second: datetime) -> bool:
    """True when both timestamps are naive or both carry a timezone."""
    return (first.tzinfo is None) == (second.tzinfo is None)

"""Utility functions for time handling.

All instants are naive local wall-clock datetimes; no time-zone conversion is
performed. Aware values coming from callers are reduced to their wall-clock
reading by dropping ``tzinfo``.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Protocol

SECONDS_PER_HOUR = 3600.0


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """Clock backed by the local wall clock."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Clock that only moves when told to.

    Used by tests and by callers that need to evaluate at a pinned instant.
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = to_local_naive(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = to_local_naive(instant)

    def advance(self, *, hours: float = 0.0, minutes: float = 0.0, seconds: float = 0.0) -> datetime:
        self._instant += timedelta(hours=hours, minutes=minutes, seconds=seconds)
        return self._instant


def to_local_naive(value: datetime) -> datetime:
    """Drop tzinfo, keeping the wall-clock reading."""
    if value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


def parse_local_datetime(value: Any) -> datetime | None:
    """
    Coerce value to a naive local datetime, returning None on failure.

    Accepts ``datetime`` instances and ISO-8601 strings such as the
    ``YYYY-MM-DDTHH:MM`` format produced by HTML datetime-local inputs.
    A bare date string is read as midnight of that day.

    Args:
        value: String or datetime to coerce

    Returns:
        Naive datetime or None if invalid
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        return None

    raw = value.strip()
    if not raw:
        return None
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    return to_local_naive(parsed)


def format_datetime_local(dt: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM`` (HTML datetime-local)."""
    return dt.strftime("%Y-%m-%dT%H:%M")


def start_of_day(dt: datetime) -> datetime:
    """Local midnight of the day containing ``dt``."""
    return datetime.combine(dt.date(), time.min)


def hours_between(start: datetime, end: datetime) -> float:
    """Signed number of hours from ``start`` to ``end``."""
    return (end - start).total_seconds() / SECONDS_PER_HOUR


def fractional_hour_of_day(dt: datetime) -> float:
    """Hour-of-day including minutes and seconds, e.g. 06:30 -> 6.5."""
    return dt.hour + dt.minute / 60.0 + dt.second / SECONDS_PER_HOUR


def shift_hours(dt: datetime, hours: float) -> datetime:
    """``dt + hours``, saturating at ``datetime.min`` / ``datetime.max``."""
    try:
        return dt + timedelta(hours=hours)
    except OverflowError:
        return datetime.max if hours > 0 else datetime.min


def round_to_minute(dt: datetime) -> datetime:
    """Round to the nearest whole minute (half a minute rounds up).

    The last representable minute never rounds past ``datetime.max``.
    """
    floored = dt.replace(second=0, microsecond=0)
    if dt - floored >= timedelta(seconds=30) and floored < datetime.max.replace(second=0, microsecond=0):
        return floored + timedelta(minutes=1)
    return floored

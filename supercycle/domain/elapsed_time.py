"""Human-readable breakdown of the time elapsed since the cycle started."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List

from supercycle.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR


@dataclass(frozen=True)
class ElapsedBreakdown:
    days: int
    hours: int
    minutes: int
    display: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "days": self.days,
            "hours": self.hours,
            "minutes": self.minutes,
            "display": self.display,
        }


ZERO_ELAPSED = ElapsedBreakdown(days=0, hours=0, minutes=0, display="0 d")


def format_elapsed(elapsed_hours: float) -> ElapsedBreakdown:
    """Split elapsed hours into whole 24h days, hours and minutes.

    The display shows days when there are any, hours when there are any
    (or, on day zero, whenever minutes are present, which can yield "0 h"),
    and minutes only when both days and hours are zero.
    """
    if elapsed_hours < 0:
        return ZERO_ELAPSED

    total_minutes = math.floor(elapsed_hours * MINUTES_PER_HOUR)
    days, remainder = divmod(total_minutes, MINUTES_PER_DAY)
    hours, minutes = divmod(remainder, MINUTES_PER_HOUR)

    parts: List[str] = []
    if days > 0:
        parts.append(f"{days} d")
    if hours > 0 or (days == 0 and minutes > 0):
        parts.append(f"{hours} h")
    if minutes > 0 and days == 0 and hours == 0:
        parts.append(f"{minutes} m")

    display = " and ".join(parts) if parts else ZERO_ELAPSED.display
    return ElapsedBreakdown(days=days, hours=hours, minutes=minutes, display=display)


__all__ = ["ElapsedBreakdown", "ZERO_ELAPSED", "format_elapsed"]

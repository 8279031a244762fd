"""Calendar grid of light/dark hours.

Rows are calendar days anchored at local midnight of the day that contains
the start instant; columns are the 24 hours of that day. Each cell is tested
at its own wall-clock hour, so a start at 06:00 lights the 06h column of
the first row while the rows still line up with real dates.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

from supercycle.constants import HOURS_PER_DAY
from supercycle.domain.cycle_clock import is_light_at_offset
from supercycle.domain.cycle_config import CycleConfig, clamp_duration_days
from supercycle.enums import LightState
from supercycle.utils.time import fractional_hour_of_day, start_of_day


@dataclass(frozen=True)
class CalendarCell:
    day_index: int
    hour_index: int
    is_light: bool
    date: date

    @property
    def date_label(self) -> str:
        return self.date.strftime("%d/%m")

    @property
    def state(self) -> LightState:
        return LightState.from_bool(self.is_light)


@dataclass(frozen=True)
class CalendarGrid:
    """Day x hour grid; ``rows[d][h]`` is the cell for day ``d``, hour ``h``."""

    start_of_day: datetime
    rows: Tuple[Tuple[CalendarCell, ...], ...]
    current_cell: Optional[Tuple[int, int]] = None

    @property
    def days(self) -> int:
        return len(self.rows)

    def cell(self, day_index: int, hour_index: int) -> CalendarCell:
        return self.rows[day_index][hour_index]

    def light_hours_on_day(self, day_index: int) -> int:
        return sum(1 for cell in self.rows[day_index] if cell.is_light)

    def to_dict(self) -> Dict[str, Any]:
        current = None
        if self.current_cell is not None:
            current = {"day_index": self.current_cell[0], "hour_index": self.current_cell[1]}
        return {
            "start_of_day": self.start_of_day.isoformat(),
            "days": self.days,
            "current_cell": current,
            "rows": [_row_to_dict(row) for row in self.rows],
        }


def _row_to_dict(row: Sequence[CalendarCell]) -> Dict[str, Any]:
    first = row[0]
    return {
        "day_index": first.day_index,
        "date": first.date.isoformat(),
        "date_label": first.date_label,
        "hours": [cell.is_light for cell in row],
        "pattern": "".join(cell.state.cell_code for cell in row),
    }


def cell_offset_hours(day_index: int, hour_index: int, fractional_start_offset: float) -> float:
    """Hours from the start instant to the wall-clock hour of a cell.

    The grid starts at midnight, ``fractional_start_offset`` hours before the
    start instant, hence the subtraction.
    """
    return day_index * HOURS_PER_DAY + hour_index - fractional_start_offset


def locate_current_cell(config: CycleConfig, as_of: datetime, days: int) -> Optional[Tuple[int, int]]:
    """Grid coordinates of ``as_of`` by wall-clock date and hour.

    Returns None when ``as_of`` falls outside the grid horizon.
    """
    day_index = (as_of.date() - config.start_instant.date()).days
    if not 0 <= day_index < days:
        return None
    return day_index, as_of.hour


def build(
    config: CycleConfig,
    duration_days: Optional[int] = None,
    *,
    as_of: Optional[datetime] = None,
) -> CalendarGrid:
    """Build the grid for ``duration_days`` (defaults to the config's horizon).

    ``duration_days`` is clamped to [1, 9999]; rows that would fall after
    ``datetime.max`` are dropped. When ``as_of`` is given the grid also
    records which cell it falls in.
    """
    days = clamp_duration_days(config.duration_days if duration_days is None else duration_days)
    anchor = start_of_day(config.start_instant)
    start_offset = fractional_hour_of_day(config.start_instant)

    rows: List[Tuple[CalendarCell, ...]] = []
    for d in range(days):
        try:
            row_date = (anchor + timedelta(days=d)).date()
        except OverflowError:
            # Rows past year 9999 cannot be dated
            break
        rows.append(
            tuple(
                CalendarCell(
                    day_index=d,
                    hour_index=h,
                    is_light=is_light_at_offset(config, cell_offset_hours(d, h, start_offset)),
                    date=row_date,
                )
                for h in range(HOURS_PER_DAY)
            )
        )

    current = locate_current_cell(config, as_of, len(rows)) if as_of is not None else None
    return CalendarGrid(start_of_day=anchor, rows=tuple(rows), current_cell=current)


__all__ = [
    "CalendarCell",
    "CalendarGrid",
    "build",
    "cell_offset_hours",
    "locate_current_cell",
]

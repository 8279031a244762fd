"""Photoperiod engine: one evaluation of a cycle at one instant.

``evaluate`` is a pure function of ``(config, as_of)``; callers supply the
instant, typically from an injected clock.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from supercycle.domain import calendar_grid
from supercycle.domain.calendar_grid import CalendarGrid
from supercycle.domain.cycle_clock import CyclePhase, phase_at
from supercycle.domain.cycle_config import CycleConfig
from supercycle.domain.elapsed_time import ElapsedBreakdown, format_elapsed
from supercycle.domain.energy_balance import balance_direction, energy_balance
from supercycle.domain.next_transition import NextTransition, predict
from supercycle.enums import BalanceDirection


@dataclass(frozen=True)
class Evaluation:
    as_of: datetime
    config: CycleConfig
    phase: CyclePhase
    calendar: CalendarGrid
    energy_balance: float
    next_transition: NextTransition
    elapsed: ElapsedBreakdown

    @property
    def balance_direction(self) -> BalanceDirection:
        return balance_direction(self.energy_balance)

    def status_dict(self) -> Dict[str, Any]:
        """Everything except the grid rows."""
        return {
            "as_of": self.as_of.isoformat(),
            "config": self.config.to_dict(),
            "phase": self.phase.to_dict(),
            "elapsed": self.elapsed.to_dict(),
            "energy_balance": {
                "hours": self.energy_balance,
                "direction": self.balance_direction.value,
            },
            "next_transition": self.next_transition.to_dict(),
        }

    def to_dict(self) -> Dict[str, Any]:
        payload = self.status_dict()
        payload["calendar"] = self.calendar.to_dict()
        return payload


def evaluate(config: CycleConfig, as_of: datetime, *, duration_days: Optional[int] = None) -> Evaluation:
    """Compute phase, calendar, energy balance, next transition and elapsed time."""
    phase = phase_at(config, as_of)
    return Evaluation(
        as_of=as_of,
        config=config,
        phase=phase,
        calendar=calendar_grid.build(config, duration_days, as_of=as_of),
        energy_balance=energy_balance(config, phase.elapsed_hours),
        next_transition=predict(phase, config, as_of),
        elapsed=format_elapsed(phase.elapsed_hours),
    )


__all__ = ["Evaluation", "evaluate"]

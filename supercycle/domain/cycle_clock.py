"""Cycle clock: where an instant falls within the configured super-cycle.

Every other computation (grid, balance, next transition) goes through these
functions for its light/dark test.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from supercycle.domain.cycle_config import CycleConfig
from supercycle.enums import LightState
from supercycle.utils.time import hours_between


def elapsed_hours(config: CycleConfig, as_of: datetime) -> float:
    """Signed hours from the start instant to ``as_of``."""
    return hours_between(config.start_instant, as_of)


def position_in_cycle(elapsed: float, cycle_length: float) -> float:
    """Offset of ``elapsed`` within the cycle, in ``[0, cycle_length)``.

    Floor-modulo, so instants before the start still land inside the cycle.
    """
    position = elapsed % cycle_length
    # -tiny % L rounds up to exactly L
    if position >= cycle_length:
        return 0.0
    return position


def is_light(position: float, light_hours: float) -> bool:
    """Light test; the boundary instant belongs to the dark phase."""
    return position < light_hours


def is_light_at_offset(config: CycleConfig, offset_hours: float) -> bool:
    """Light test for an offset (in hours) relative to the start instant."""
    return is_light(position_in_cycle(offset_hours, config.cycle_length), config.light_hours)


def completed_cycles(elapsed: float, cycle_length: float) -> int:
    """Number of full super-cycles completed since the start (never negative)."""
    return max(0, math.floor(elapsed / cycle_length))


@dataclass(frozen=True)
class CyclePhase:
    """Position of one instant within the super-cycle."""

    elapsed_hours: float
    position_in_cycle: float
    is_light: bool
    completed_cycles: int

    @property
    def state(self) -> LightState:
        return LightState.from_bool(self.is_light)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "elapsed_hours": self.elapsed_hours,
            "position_in_cycle": self.position_in_cycle,
            "is_light": self.is_light,
            "state": self.state.value,
            "completed_cycles": self.completed_cycles,
        }


def phase_at(config: CycleConfig, as_of: datetime) -> CyclePhase:
    elapsed = elapsed_hours(config, as_of)
    position = position_in_cycle(elapsed, config.cycle_length)
    return CyclePhase(
        elapsed_hours=elapsed,
        position_in_cycle=position,
        is_light=is_light(position, config.light_hours),
        completed_cycles=completed_cycles(elapsed, config.cycle_length),
    )


__all__ = [
    "CyclePhase",
    "completed_cycles",
    "elapsed_hours",
    "is_light",
    "is_light_at_offset",
    "phase_at",
    "position_in_cycle",
]

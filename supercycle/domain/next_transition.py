"""Prediction of the next lights ON/OFF switch."""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from supercycle.domain.cycle_clock import CyclePhase
from supercycle.domain.cycle_config import CycleConfig
from supercycle.enums import LightState, TransitionAction
from supercycle.utils.time import round_to_minute, shift_hours


@dataclass(frozen=True)
class NextTransition:
    hours_to_next: float
    next_state: LightState
    at_instant: datetime

    @property
    def action(self) -> TransitionAction:
        if self.next_state is LightState.LIGHT:
            return TransitionAction.LIGHTS_ON
        return TransitionAction.LIGHTS_OFF

    @property
    def rounded_instant(self) -> datetime:
        return round_to_minute(self.at_instant)

    @property
    def display_time(self) -> str:
        return self.rounded_instant.strftime("%H:%M")

    @property
    def display_date(self) -> str:
        rounded = self.rounded_instant
        return f"{rounded.strftime('%b')} {rounded.day}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hours_to_next": self.hours_to_next,
            "next_state": self.next_state.value,
            "action": self.action.value,
            "at": self.rounded_instant.isoformat(),
            "time": self.display_time,
            "date": self.display_date,
        }


def predict(phase: CyclePhase, config: CycleConfig, as_of: datetime) -> NextTransition:
    """Time until the current phase ends and the state it switches to."""
    if phase.is_light:
        hours_to_next = config.light_hours - phase.position_in_cycle
        next_state = LightState.DARK
    else:
        hours_to_next = config.cycle_length - phase.position_in_cycle
        next_state = LightState.LIGHT

    if not math.isfinite(hours_to_next) or hours_to_next < 0:
        hours_to_next = 0.0

    return NextTransition(
        hours_to_next=hours_to_next,
        next_state=next_state,
        at_instant=shift_hours(as_of, hours_to_next),
    )


__all__ = ["NextTransition", "predict"]

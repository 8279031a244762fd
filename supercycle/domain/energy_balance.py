"""Energy balance of a custom photoperiod against the 12/12 reference.

Positive values are light-hours saved relative to a schedule that is lit
exactly half of the time; negative values are light-hours spent on top of it.
"""
from __future__ import annotations

from supercycle.constants import REFERENCE_LIGHT_FRACTION
from supercycle.domain.cycle_config import CycleConfig
from supercycle.enums import BalanceDirection


def energy_balance(config: CycleConfig, elapsed_hours: float) -> float:
    if elapsed_hours < 0:
        return 0.0
    consumed_custom = config.light_fraction * elapsed_hours
    consumed_reference = REFERENCE_LIGHT_FRACTION * elapsed_hours
    return consumed_reference - consumed_custom


def balance_direction(balance: float) -> BalanceDirection:
    if balance > 0:
        return BalanceDirection.SAVING
    if balance < 0:
        return BalanceDirection.EXTRA
    return BalanceDirection.NEUTRAL


__all__ = ["balance_direction", "energy_balance"]

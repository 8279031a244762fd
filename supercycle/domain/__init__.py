"""
Domain Package
==============
Photoperiod value objects and the pure cycle arithmetic built on them.

Every function here is side-effect free: given a configuration and an
instant it returns a fresh value object and keeps no state between calls.
"""

from .calendar_grid import CalendarCell, CalendarGrid
from .cycle_clock import CyclePhase, phase_at
from .cycle_config import CycleConfig, CycleSettings, ValidationResult, validate
from .elapsed_time import ElapsedBreakdown, format_elapsed
from .energy_balance import balance_direction, energy_balance
from .engine import Evaluation, evaluate
from .next_transition import NextTransition, predict

__all__ = [
    # Configuration
    "CycleConfig",
    "CycleSettings",
    "ValidationResult",
    "validate",
    # Cycle clock
    "CyclePhase",
    "phase_at",
    # Derived values
    "CalendarCell",
    "CalendarGrid",
    "ElapsedBreakdown",
    "NextTransition",
    "balance_direction",
    "energy_balance",
    "format_elapsed",
    "predict",
    # Engine
    "Evaluation",
    "evaluate",
]

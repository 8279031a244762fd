"""
Enums Module
============

This module provides enumeration types for the SuperCycle application.
Enums ensure type safety and consistency across the codebase.
"""

from supercycle.enums.cycle import (
    BalanceDirection,
    LightState,
    TransitionAction,
    ValidationErrorKind,
)

__all__ = [
    "BalanceDirection",
    "LightState",
    "TransitionAction",
    "ValidationErrorKind",
]

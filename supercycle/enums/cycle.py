"""
Cycle-related Enumerations
==========================

Light/dark state, energy balance direction and validation error kinds.
"""

from enum import Enum


class LightState(str, Enum):
    """State of the lights at a given instant.

    The wire value is the switch label used by the API ("ON" / "OFF").
    """

    LIGHT = "ON"
    DARK = "OFF"

    @classmethod
    def from_bool(cls, is_light: bool) -> "LightState":
        return cls.LIGHT if is_light else cls.DARK

    @property
    def is_light(self) -> bool:
        return self is LightState.LIGHT

    @property
    def cell_code(self) -> str:
        """Single-letter grid code: L = light, D = dark."""
        return "L" if self is LightState.LIGHT else "D"

    def __str__(self):
        return self.value


class TransitionAction(str, Enum):
    """Switch action performed at the next transition."""

    LIGHTS_ON = "lights_on"
    LIGHTS_OFF = "lights_off"

    def __str__(self):
        return self.value


class BalanceDirection(str, Enum):
    """Sign of the energy balance against the 12/12 reference.

    - SAVING: less cumulative light than the reference
    - EXTRA: more cumulative light than the reference
    - NEUTRAL: exactly the reference amount
    """

    SAVING = "saving"
    EXTRA = "extra"
    NEUTRAL = "neutral"

    def __str__(self):
        return self.value


class ValidationErrorKind(str, Enum):
    """Reasons a cycle configuration can be rejected."""

    MISSING_START = "MissingStart"
    INVALID_DATE_FORMAT = "InvalidDateFormat"
    NEGATIVE_LIGHT = "NegativeLight"
    NEGATIVE_DARK = "NegativeDark"
    DURATION_BELOW_MINIMUM = "DurationBelowMinimum"
    MALFORMED_IMPORT_PAYLOAD = "MalformedImportPayload"

    def __str__(self):
        return self.value

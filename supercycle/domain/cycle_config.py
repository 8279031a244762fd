"""Cycle configuration domain model.

Two shapes of the same schedule live here:

- :class:`CycleSettings` is the raw, editable record exactly as the user (or
  an imported file) supplied it. It may hold invalid values and is exported
  verbatim.
- :class:`CycleConfig` is the normalized, immutable value the cycle
  arithmetic runs on. It is always usable, even when the settings it came
  from failed validation.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from supercycle.constants import (
    CYCLE_LENGTH_EPSILON,
    MAX_DURATION_DAYS,
    MIN_DURATION_DAYS,
)
from supercycle.domain.exceptions import ValidationError
from supercycle.enums import ValidationErrorKind
from supercycle.utils.time import format_datetime_local, parse_local_datetime, start_of_day

_MESSAGES: Dict[ValidationErrorKind, str] = {
    ValidationErrorKind.MISSING_START: "Start date is required.",
    ValidationErrorKind.INVALID_DATE_FORMAT: "Invalid start date format.",
    ValidationErrorKind.NEGATIVE_LIGHT: "Light hours must be a number greater than or equal to 0.",
    ValidationErrorKind.NEGATIVE_DARK: "Dark hours must be a number greater than or equal to 0.",
    ValidationErrorKind.DURATION_BELOW_MINIMUM: "Duration must be at least 1 day.",
}


def coerce_number(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or None.

    Accepts ints, floats and numeric strings. Booleans and None are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            number = float(raw)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def clamp_duration_days(value: Any) -> int:
    """Clamp a duration to ``[MIN_DURATION_DAYS, MAX_DURATION_DAYS]``.

    Non-numeric input is treated as 0 and therefore becomes the minimum.
    """
    number = coerce_number(value)
    days = int(number) if number is not None else 0
    return max(MIN_DURATION_DAYS, min(MAX_DURATION_DAYS, days))


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :func:`validate`. ``kind`` is None when valid."""

    ok: bool
    kind: Optional[ValidationErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, kind: ValidationErrorKind) -> ValidationResult:
        return cls(ok=False, kind=kind, message=_MESSAGES[kind])

    def raise_for_invalid(self) -> None:
        if not self.ok and self.kind is not None:
            raise ValidationError(self.kind, self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "kind": self.kind.value if self.kind else None,
            "message": self.message or None,
        }


@dataclass(frozen=True)
class CycleSettings:
    """Raw schedule settings in the transferable four-field shape."""

    start_date: Any
    light_hours: Any
    dark_hours: Any
    duration_days: Any

    @classmethod
    def defaults(
        cls,
        today: datetime,
        *,
        light_hours: float,
        dark_hours: float,
        duration_days: int,
    ) -> CycleSettings:
        return cls(
            start_date=format_datetime_local(start_of_day(today)),
            light_hours=light_hours,
            dark_hours=dark_hours,
            duration_days=duration_days,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CycleSettings:
        """Read the four transfer keys as-is; missing keys become None."""
        return cls(
            start_date=data.get("startDate"),
            light_hours=data.get("lightHours"),
            dark_hours=data.get("darkHours"),
            duration_days=data.get("durationDays"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startDate": self.start_date,
            "lightHours": self.light_hours,
            "darkHours": self.dark_hours,
            "durationDays": self.duration_days,
        }

    def with_changes(self, **changes: Any) -> CycleSettings:
        return replace(self, **changes)


def validate(raw: CycleSettings | Mapping[str, Any]) -> ValidationResult:
    """Check settings against the validation rules; first violation wins.

    Rules, in priority order:

    1. start date present
    2. start date parseable
    3. light hours numeric and >= 0
    4. dark hours numeric and >= 0
    5. duration numeric and >= 1 day
    """
    settings = raw if isinstance(raw, CycleSettings) else CycleSettings.from_dict(raw)

    start = settings.start_date
    if start is None or (isinstance(start, str) and not start.strip()):
        return ValidationResult.failure(ValidationErrorKind.MISSING_START)
    if parse_local_datetime(start) is None:
        return ValidationResult.failure(ValidationErrorKind.INVALID_DATE_FORMAT)

    light = coerce_number(settings.light_hours)
    if light is None or light < 0:
        return ValidationResult.failure(ValidationErrorKind.NEGATIVE_LIGHT)

    dark = coerce_number(settings.dark_hours)
    if dark is None or dark < 0:
        return ValidationResult.failure(ValidationErrorKind.NEGATIVE_DARK)

    duration = coerce_number(settings.duration_days)
    if duration is None or duration < MIN_DURATION_DAYS:
        return ValidationResult.failure(ValidationErrorKind.DURATION_BELOW_MINIMUM)

    return ValidationResult.success()


@dataclass(frozen=True)
class CycleConfig:
    """Immutable schedule definition used by every cycle computation.

    - start_instant: naive local datetime at which the first light phase begins
    - light_hours / dark_hours: phase durations, never negative
    - duration_days: calendar horizon, clamped to [1, 9999]
    """

    start_instant: datetime
    light_hours: float
    dark_hours: float
    duration_days: int = MIN_DURATION_DAYS

    def __post_init__(self) -> None:
        object.__setattr__(self, "duration_days", clamp_duration_days(self.duration_days))

    @property
    def cycle_length(self) -> float:
        total = self.light_hours + self.dark_hours
        return total if total > 0 else CYCLE_LENGTH_EPSILON

    @property
    def light_fraction(self) -> float:
        return self.light_hours / self.cycle_length

    @classmethod
    def from_settings(cls, settings: CycleSettings, *, fallback_start: datetime) -> CycleConfig:
        """Build a usable config from settings, whatever their validity.

        Unparseable start dates fall back to midnight of ``fallback_start``;
        non-numeric or negative hours become 0; the duration is clamped.
        """
        start = parse_local_datetime(settings.start_date)
        if start is None:
            start = start_of_day(fallback_start)

        light = coerce_number(settings.light_hours) or 0.0
        dark = coerce_number(settings.dark_hours) or 0.0

        return cls(
            start_instant=start,
            light_hours=max(0.0, light),
            dark_hours=max(0.0, dark),
            duration_days=clamp_duration_days(settings.duration_days),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_instant": self.start_instant.isoformat(),
            "light_hours": self.light_hours,
            "dark_hours": self.dark_hours,
            "duration_days": self.duration_days,
            "cycle_length": self.cycle_length,
        }


__all__ = [
    "CycleConfig",
    "CycleSettings",
    "ValidationResult",
    "clamp_duration_days",
    "coerce_number",
    "validate",
]

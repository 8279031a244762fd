"""
Photoperiod Schemas
===================

Pydantic models for the photoperiod API request bodies and query strings.
Range rules (non-negative hours, minimum duration) are left to the domain
validator so that their error kinds reach the client unchanged.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from supercycle.domain.cycle_config import CycleSettings
from supercycle.utils.time import parse_local_datetime


class CycleSettingsSchema(BaseModel):
    """Full replacement of the live settings (transfer-record keys)."""

    start_date: str = Field(..., alias="startDate", description="Local start, YYYY-MM-DDTHH:MM")
    light_hours: float = Field(..., alias="lightHours", description="Hours of light per cycle")
    dark_hours: float = Field(..., alias="darkHours", description="Hours of dark per cycle")
    duration_days: int = Field(..., alias="durationDays", description="Calendar horizon in days")

    model_config = ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "startDate": "2024-01-01T00:00",
                "lightHours": 13,
                "darkHours": 14,
                "durationDays": 60,
            }
        },
    )

    def to_settings(self) -> CycleSettings:
        return CycleSettings(
            start_date=self.start_date,
            light_hours=self.light_hours,
            dark_hours=self.dark_hours,
            duration_days=self.duration_days,
        )


class EvaluationQuerySchema(BaseModel):
    """Query string for the evaluation endpoints."""

    at: Optional[datetime] = Field(default=None, description="Evaluate at this local instant instead of now")
    days: Optional[int] = Field(default=None, description="Calendar horizon override (clamped to 1..9999)")

    @field_validator("at", mode="before")
    @classmethod
    def parse_at(cls, v):
        if v is None or v == "":
            return None
        parsed = parse_local_datetime(v)
        if parsed is None:
            raise ValueError("at must be an ISO-8601 local date-time")
        return parsed

    @field_validator("days", mode="before")
    @classmethod
    def blank_days(cls, v):
        if v == "":
            return None
        return v


def error_list(exc: ValidationError) -> List[Dict[str, Any]]:
    """JSON-safe summary of pydantic errors."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]

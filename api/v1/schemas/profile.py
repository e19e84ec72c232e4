from __future__ import annotations
from pydantic import BaseModel, Field

from core.models import ProfileMetrics


class MetricsRequest(BaseModel):
    age: int | None = None
    height_cm: float | None = Field(None, allow_inf_nan=False)
    weight_kg: float | None = Field(None, allow_inf_nan=False)
    gender: str | None = Field(None, examples=["male", "female", "other"])
    activity_level: str | None = Field(
        None, examples=["sedentary", "light", "moderate", "active", "very_active"]
    )


class MetricsResponse(BaseModel):
    metrics: ProfileMetrics | None   # null → not enough data yet

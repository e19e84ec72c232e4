from __future__ import annotations
import datetime as dt
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, field_validator

from core.models import Number


class NutritionLogIn(BaseModel):
    logged_at: str
    calories: float | None = None

    model_config = ConfigDict(extra="ignore")


class WorkoutRecordIn(BaseModel):
    created_at: str
    completed: bool = False

    model_config = ConfigDict(extra="ignore")


class DashboardRequest(BaseModel):
    nutrition_logs: list[NutritionLogIn] = []
    workout_plans: list[WorkoutRecordIn] = []
    today: dt.date | None = None
    tz: str = "UTC"

    @field_validator("tz")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown time zone {v!r}") from exc
        return v


class DayCalories(BaseModel):
    day: str
    date: dt.date
    calories: Number


class DayWorkouts(BaseModel):
    day: str
    date: dt.date
    workouts: int


class DashboardSummary(BaseModel):
    calories_today: Number
    workouts_completed: int
    workouts_total: int
    calorie_series: list[DayCalories]
    workout_series: list[DayWorkouts]

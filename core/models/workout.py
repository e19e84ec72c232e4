from typing import Any, Literal

from pydantic import BaseModel, field_validator

from .nutrition import Number

Difficulty = Literal["beginner", "intermediate", "advanced"]


class Exercise(BaseModel):
    name: str
    sets: Number
    reps: str              # "12" or "30 seconds"
    rest_seconds: Number

    @field_validator("reps", mode="before")
    @classmethod
    def _reps_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(int(v)) if float(v).is_integer() else str(v)
        return v


class WorkoutPlan(BaseModel):
    title: str
    description: str
    difficulty: Difficulty
    duration_minutes: Number
    exercises: list[Exercise] = []   # execution order

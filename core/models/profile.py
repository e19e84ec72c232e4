from pydantic import BaseModel


class ProfileSnapshot(BaseModel):
    """The stored profile row as the client sends it; unknown columns are ignored."""

    age: int | None = None
    gender: str | None = None
    weight_kg: float | None = None
    height_cm: float | None = None
    activity_level: str | None = None
    fitness_goal: str | None = None
    bmi: float | None = None
    daily_calories: float | None = None


class ProfileMetrics(BaseModel):
    bmi: float
    bmr: int
    daily_calories: int

from __future__ import annotations
from pydantic import BaseModel

from core.models import ProfileSnapshot, WorkoutPlan


class WorkoutRequest(BaseModel):
    profile: ProfileSnapshot | None = None


class WorkoutResponse(WorkoutPlan):
    pass

"""Typed results of the extraction pipeline and the profile snapshot it reads."""

from .nutrition import MealType, NutritionEstimate, Number
from .profile import ProfileMetrics, ProfileSnapshot
from .workout import Difficulty, Exercise, WorkoutPlan

__all__ = [
    "MealType",
    "NutritionEstimate",
    "Number",
    "ProfileMetrics",
    "ProfileSnapshot",
    "Difficulty",
    "Exercise",
    "WorkoutPlan",
]

"""Re-export individual schema modules for easy imports."""

from .nutrition import NutritionRequest, NutritionResponse
from .workout import WorkoutRequest, WorkoutResponse
from .profile import MetricsRequest, MetricsResponse
from .dashboard import DashboardRequest, DashboardSummary

__all__ = [
    "NutritionRequest",
    "NutritionResponse",
    "WorkoutRequest",
    "WorkoutResponse",
    "MetricsRequest",
    "MetricsResponse",
    "DashboardRequest",
    "DashboardSummary",
]

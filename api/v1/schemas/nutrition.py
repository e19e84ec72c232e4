from __future__ import annotations
from pydantic import BaseModel, Field

from core.models import NutritionEstimate


class NutritionRequest(BaseModel):
    food_description: str = Field(..., examples=["2 eggs, toast with butter, orange juice"])
    meal_type: str = Field(..., examples=["breakfast", "lunch", "dinner", "snack"])


class NutritionResponse(NutritionEstimate):
    """Same fields as the domain estimate; this is the wire shape."""

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator


def _json_number(v: Any) -> Any:
    # bools and numeric strings are type errors from upstream, not numbers
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("expected a JSON number")
    if not math.isfinite(v):
        raise ValueError("expected a finite number")
    return v


# ints stay ints on the wire; fractional estimates stay floats
Number = Annotated[Union[int, float], BeforeValidator(_json_number)]

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")


class NutritionEstimate(BaseModel):
    calories: Number
    protein_g: Number
    carbs_g: Number
    fat_g: Number
    analysis: str

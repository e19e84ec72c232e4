# services/extraction.py
"""
Task orchestrators: prompt → forced tool call → typed result.

The decode step is fail-closed. A decoded payload missing a required
field is rejected with the offending field names; the only fallback is an
absent / non-list `exercises`, which becomes an empty plan body.
"""
from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.errors import InvalidPayloadError, InvalidRequestError
from core.models import NutritionEstimate, ProfileSnapshot, WorkoutPlan
from core.models.nutrition import MEAL_TYPES
from core.prompts import nutrition_prompt, workout_prompt
from services.gateway import GatewayClient

_LOG = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


def decode(model: type[_M], payload: dict[str, Any]) -> _M:
    """Validate an untyped tool-call payload into `model` or raise InvalidPayloadError."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        fields = list(dict.fromkeys(
            ".".join(str(p) for p in err["loc"]) or "<root>"
            for err in exc.errors()
        ))
        _LOG.error("Structured result rejected for %s: %s", model.__name__, fields)
        raise InvalidPayloadError(fields) from exc


class ExtractionService:
    def __init__(self, gateway: GatewayClient) -> None:
        self.gateway = gateway

    # ───────────────────────── nutrition ──────────────────────────
    def analyze_nutrition(self, food_description: str, meal_type: str) -> NutritionEstimate:
        if not food_description or not food_description.strip():
            raise InvalidRequestError("food_description is required")
        if meal_type not in MEAL_TYPES:
            raise InvalidRequestError(
                f"meal_type must be one of: {', '.join(MEAL_TYPES)}"
            )

        prompt = nutrition_prompt(food_description, meal_type)
        args = self.gateway.complete(prompt, missing_message="No analysis returned")
        return decode(NutritionEstimate, args)

    # ───────────────────────── workout ────────────────────────────
    def generate_workout(self, profile: ProfileSnapshot | None) -> WorkoutPlan:
        prompt = workout_prompt(profile)
        args = self.gateway.complete(prompt, missing_message="No workout plan returned")

        if not isinstance(args.get("exercises"), list):
            _LOG.warning("Workout result has no exercise list; using an empty one")
            args = {**args, "exercises": []}
        return decode(WorkoutPlan, args)

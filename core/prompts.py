"""
core/prompts.py
────────────────────────────────────────────────────────────────────────
Instruction text + output schema for each structured task.

A task is a `StructuredPrompt`: the system instruction, the user
instruction and the one tool the model is forced to call. Schemas are
plain JSON-schema dicts, strict (`additionalProperties: false`), so the
gateway client stays provider-agnostic about what it is extracting.

Nothing here is random: identical inputs give identical prompts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from core.models import ProfileSnapshot

UNKNOWN = "unknown"
NO_PROFILE_CONTEXT = "No profile data available. Create a general beginner workout."


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    parameters: dict[str, Any] = field(hash=False)


@dataclass(frozen=True)
class StructuredPrompt:
    system: str
    instruction: str
    tool: ToolSpec


# ──────────────────────────────────────────────────────────────────────
#  Schemas
# ──────────────────────────────────────────────────────────────────────
NUTRITION_TOOL = ToolSpec(
    name="log_nutrition",
    description="Log the estimated nutrition information for the food",
    parameters={
        "type": "object",
        "properties": {
            "calories": {"type": "number", "description": "Estimated total calories"},
            "protein_g": {"type": "number", "description": "Estimated protein in grams"},
            "carbs_g": {"type": "number", "description": "Estimated carbs in grams"},
            "fat_g": {"type": "number", "description": "Estimated fat in grams"},
            "analysis": {
                "type": "string",
                "description": "Brief health analysis and suggestions (1-2 sentences)",
            },
        },
        "required": ["calories", "protein_g", "carbs_g", "fat_g", "analysis"],
        "additionalProperties": False,
    },
)

_EXERCISE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "sets": {"type": "number"},
        "reps": {"type": "string", "description": "e.g. '12' or '30 seconds'"},
        "rest_seconds": {"type": "number"},
    },
    "required": ["name", "sets", "reps", "rest_seconds"],
    "additionalProperties": False,
}

WORKOUT_TOOL = ToolSpec(
    name="create_workout",
    description="Create a structured workout plan",
    parameters={
        "type": "object",
        "properties": {
            "title": {"type": "string", "description": "Workout title, e.g. 'Upper Body Power'"},
            "description": {
                "type": "string",
                "description": "Brief description of the workout goals (1 sentence)",
            },
            "difficulty": {"type": "string", "enum": ["beginner", "intermediate", "advanced"]},
            "duration_minutes": {"type": "number", "description": "Estimated duration in minutes"},
            "exercises": {"type": "array", "items": _EXERCISE_SCHEMA},
        },
        "required": ["title", "description", "difficulty", "duration_minutes", "exercises"],
        "additionalProperties": False,
    },
)


# ──────────────────────────────────────────────────────────────────────
#  Nutrition
# ──────────────────────────────────────────────────────────────────────
def nutrition_prompt(food_description: str, meal_type: str) -> StructuredPrompt:
    return StructuredPrompt(
        system=(
            "You are a nutrition analyzer. Given a food description, estimate calories "
            f"and macronutrients. You must call the {NUTRITION_TOOL.name} function with "
            "your estimates."
        ),
        instruction=(
            f'Analyze this {meal_type} meal: "{food_description}". '
            "Estimate the total calories and macronutrients."
        ),
        tool=NUTRITION_TOOL,
    )


# ──────────────────────────────────────────────────────────────────────
#  Workout
# ──────────────────────────────────────────────────────────────────────
def _fmt(value: Any) -> str:
    """Render a profile value; falsy values (None, "", 0) become "unknown"."""
    if not value:
        return UNKNOWN
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def profile_context(profile: ProfileSnapshot | None) -> str:
    if profile is None:
        return NO_PROFILE_CONTEXT
    return (
        f"User profile: Age {_fmt(profile.age)}, "
        f"Gender {_fmt(profile.gender)}, "
        f"Weight {_fmt(profile.weight_kg)}kg, "
        f"Height {_fmt(profile.height_cm)}cm, "
        f"Activity level: {_fmt(profile.activity_level)}, "
        f"Goal: {_fmt(profile.fitness_goal)}, "
        f"BMI: {_fmt(profile.bmi)}, "
        f"Daily calorie target: {_fmt(profile.daily_calories)}"
    )


def workout_prompt(profile: ProfileSnapshot | None) -> StructuredPrompt:
    return StructuredPrompt(
        system=(
            "You are a professional fitness trainer AI. Generate a personalized workout "
            f"plan based on user profile. You must call the {WORKOUT_TOOL.name} function."
        ),
        instruction=f"Create a workout plan for today. {profile_context(profile)}",
        tool=WORKOUT_TOOL,
    )

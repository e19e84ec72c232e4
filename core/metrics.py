"""
core/metrics.py
────────────────────────────────────────────────────────────────────────
Body metrics derived from a profile:

1. BMI  (kg / m², one decimal)
2. BMR  (Mifflin–St Jeor)
3. Daily calorie target (BMR × activity multiplier)

Non-male genders, "other" included, use the female coefficient set.
This is a modelling simplification, not a clinical claim.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from core.models.profile import ProfileMetrics

# ──────────────────────────────────────────────────────────────────────
#  Activity multipliers (PAL)
# ──────────────────────────────────────────────────────────────────────
ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}
DEFAULT_MULTIPLIER = 1.2


# ──────────────────────────────────────────────────────────────────────
#  Input dataclass
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class BodyMeasurements:
    age: int | None
    height_cm: float | None
    weight_kg: float | None
    gender: str | None            # "male" | "female" | "other"
    activity_level: str | None = None

    @property
    def complete(self) -> bool:
        sizes = (self.age, self.height_cm, self.weight_kg)
        return bool(self.gender) and all(_positive(v) for v in sizes)


def _positive(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def activity_multiplier(level: str | None) -> float:
    return ACTIVITY_MULTIPLIERS.get(level or "", DEFAULT_MULTIPLIER)


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
def bmi(weight_kg: float, height_cm: float) -> float:
    return weight_kg / (height_cm / 100) ** 2


def bmr(weight_kg: float, height_cm: float, age: int, gender: str) -> float:
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + (5 if gender == "male" else -161)


def _round_half_up(value: float, digits: int = 0) -> float:
    # ties go up (x.5 → x+1), not to the nearest even number
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def compute_metrics(m: BodyMeasurements) -> ProfileMetrics | None:
    """Return BMI/BMR/daily calories, or ``None`` when the input is insufficient."""
    if not m.complete:
        return None

    bmr_val = bmr(m.weight_kg, m.height_cm, m.age, m.gender)
    daily = bmr_val * activity_multiplier(m.activity_level)
    return ProfileMetrics(
        bmi=_round_half_up(bmi(m.weight_kg, m.height_cm), 1),
        bmr=int(_round_half_up(bmr_val)),
        daily_calories=int(_round_half_up(daily)),
    )

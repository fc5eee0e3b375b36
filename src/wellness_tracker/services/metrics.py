"""Body metric calculations.

BMR uses the Mifflin-St Jeor equation. TDEE scales BMR by an activity
multiplier, and the daily calorie goal applies a fixed deficit or surplus to
TDEE depending on the objective. Rounding is half-up throughout, so 1508.5
becomes 1509 rather than the banker's-rounded 1508.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from wellness_tracker.domain.profiles import (
    ActivityLevel,
    BodyMetrics,
    DerivedMetrics,
    Gender,
    Objective,
)
from wellness_tracker.errors import ValidationError

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}

CALORIE_DEFICIT = 500
CALORIE_SURPLUS = 300


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals, ties away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def bmr(weight_kg: float, height_cm: float, age: int, gender: Gender | str) -> float:
    """Basal metabolic rate in kcal/day."""
    _require_positive(weight_kg=weight_kg, height_cm=height_cm, age=age)
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if Gender.parse(gender) is Gender.MALE:
        return base + 5
    return base - 161


def tdee(bmr_kcal: float, activity_level: ActivityLevel | str) -> float:
    """Total daily energy expenditure in kcal/day."""
    return bmr_kcal * ACTIVITY_MULTIPLIERS[ActivityLevel.parse(activity_level)]


def bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index."""
    _require_positive(weight_kg=weight_kg, height_cm=height_cm)
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def daily_calorie_goal(tdee_kcal: float, objective: Objective | str) -> float:
    """Calorie target for the objective, before rounding."""
    resolved = Objective.parse(objective)
    if resolved is Objective.LOSE_WEIGHT:
        return tdee_kcal - CALORIE_DEFICIT
    if resolved is Objective.GAIN_WEIGHT:
        return tdee_kcal + CALORIE_SURPLUS
    return tdee_kcal


def compute_metrics(metrics: BodyMetrics) -> DerivedMetrics:
    """Derive rounded BMR, TDEE, BMI and calorie goal from biometrics."""
    bmr_kcal = bmr(metrics.weight_kg, metrics.height_cm, metrics.age, metrics.gender)
    tdee_kcal = tdee(bmr_kcal, metrics.activity_level)
    return DerivedMetrics(
        bmr=int(round_half_up(bmr_kcal)),
        tdee=int(round_half_up(tdee_kcal)),
        bmi=round_half_up(bmi(metrics.weight_kg, metrics.height_cm), 1),
        daily_calorie_goal=int(
            round_half_up(daily_calorie_goal(tdee_kcal, metrics.objective))
        ),
    )


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if value is None or not math.isfinite(value) or value <= 0:
            raise ValidationError(f"{name} must be positive")

"""Request and error payloads for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field

from wellness_tracker.domain.stats import NutrientTotals


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail


class CustomFoodIn(BaseModel):
    """Free-form food that is not in the catalog."""

    name: str
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0

    def nutrients(self) -> NutrientTotals:
        return NutrientTotals(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            fiber=self.fiber,
        )


class MealItemIn(BaseModel):
    """One selected food: a catalog id or a custom food, with a quantity."""

    food_id: str | None = None
    custom: CustomFoodIn | None = None
    quantity: int = 1


class MealIn(BaseModel):
    items: list[MealItemIn] = Field(default_factory=list)
    meal_type: str | None = None
    logged_at: datetime | None = None
    per_item: bool = False


class WorkoutIn(BaseModel):
    workout_type: str
    duration_minutes: float
    name: str | None = None
    notes: str | None = None
    logged_at: datetime | None = None


class MeditationIn(BaseModel):
    duration_minutes: float
    type: str = "mindfulness"
    notes: str | None = None
    logged_at: datetime | None = None


class WaterIn(BaseModel):
    glasses: float
    logged_at: datetime | None = None


class EditSelectionIn(BaseModel):
    """A stored meal's name and totals to read back into a selection."""

    name: str
    calories: float = 0.0
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None

    def nutrients(self) -> NutrientTotals:
        return NutrientTotals(
            calories=self.calories,
            protein=self.protein or 0.0,
            carbs=self.carbs or 0.0,
            fat=self.fat or 0.0,
            fiber=self.fiber or 0.0,
        )


class ProfileIn(BaseModel):
    display_name: str | None = None
    age: int | None = None
    height: float | None = None
    weight: float | None = None
    gender: str | None = None
    activity_level: str | None = None
    goal: str | None = None
    daily_calorie_goal: int | None = None
    daily_water_goal: int | None = None
    daily_meditation_goal: int | None = None


class MetricsIn(BaseModel):
    weight_kg: float
    height_cm: float
    age: int
    gender: str
    activity_level: str
    objective: str = "maintain_weight"

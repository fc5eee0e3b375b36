"""Domain models for daily totals and goal progress."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutrientTotals:
    """Summed nutrients for a meal, a selection or a day."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float


@dataclass(frozen=True)
class DailyTotals:
    """Per-tracker totals for one day."""

    calories: float
    calories_burned: float
    meditation_minutes: float
    water_glasses: float


@dataclass(frozen=True)
class WorkoutTotals:
    """Summary of a day's workouts."""

    total_minutes: float
    total_calories: float
    workout_count: int


@dataclass(frozen=True)
class TrackerProgress:
    """Progress of one tracker towards its daily goal."""

    current: float
    goal: float
    percentage: float


@dataclass(frozen=True)
class GoalProgress:
    """Progress for every tracker and the composite score."""

    calories: TrackerProgress
    calories_burned: TrackerProgress
    meditation_minutes: TrackerProgress
    water_glasses: TrackerProgress
    composite_score: int

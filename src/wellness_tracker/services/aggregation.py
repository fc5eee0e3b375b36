"""Pure aggregation over a day's logged entries."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, time, timedelta
from typing import TypeVar
from zoneinfo import ZoneInfo

from wellness_tracker.domain.entries import (
    LogEntry,
    MealEntry,
    MeditationEntry,
    WaterEntry,
    WorkoutEntry,
)
from wellness_tracker.domain.stats import DailyTotals, NutrientTotals, WorkoutTotals

EntryT = TypeVar("EntryT", bound=LogEntry)


def day_bounds(day: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return [local midnight, next local midnight) for a calendar day."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start, end


def entries_for_day(entries: Iterable[EntryT], day: date, tz: ZoneInfo) -> list[EntryT]:
    """Keep the entries logged on the given local day."""
    return [entry for entry in entries if entry.logged_at.astimezone(tz).date() == day]


def aggregate_meals(meals: Iterable[MealEntry]) -> NutrientTotals:
    """Sum nutrients across meals; missing values count as zero."""
    calories = protein = carbs = fat = fiber = 0.0
    for meal in meals:
        calories += meal.calories or 0.0
        protein += meal.protein or 0.0
        carbs += meal.carbs or 0.0
        fat += meal.fat or 0.0
        fiber += meal.fiber or 0.0
    return NutrientTotals(
        calories=calories, protein=protein, carbs=carbs, fat=fat, fiber=fiber
    )


def aggregate_workouts(workouts: Iterable[WorkoutEntry]) -> WorkoutTotals:
    """Sum workout minutes and burn, and count the workouts."""
    minutes = calories = 0.0
    count = 0
    for workout in workouts:
        minutes += workout.duration_minutes or 0
        calories += workout.calories_burned or 0.0
        count += 1
    return WorkoutTotals(
        total_minutes=minutes, total_calories=calories, workout_count=count
    )


def total_meditation_minutes(sessions: Iterable[MeditationEntry]) -> float:
    return float(sum(session.duration_minutes or 0 for session in sessions))


def total_water_glasses(intakes: Iterable[WaterEntry]) -> float:
    return float(sum(intake.glasses or 0 for intake in intakes))


def aggregate(entries: Sequence[LogEntry]) -> DailyTotals:
    """Compute per-tracker totals for a mixed sequence of entries."""
    meals = [entry for entry in entries if isinstance(entry, MealEntry)]
    workouts = [entry for entry in entries if isinstance(entry, WorkoutEntry)]
    sessions = [entry for entry in entries if isinstance(entry, MeditationEntry)]
    intakes = [entry for entry in entries if isinstance(entry, WaterEntry)]
    return DailyTotals(
        calories=aggregate_meals(meals).calories,
        calories_burned=aggregate_workouts(workouts).total_calories,
        meditation_minutes=total_meditation_minutes(sessions),
        water_glasses=total_water_glasses(intakes),
    )

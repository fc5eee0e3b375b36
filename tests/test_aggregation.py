"""Tests for daily aggregation."""

from datetime import UTC, date, datetime
from uuid import uuid4
from zoneinfo import ZoneInfo

from wellness_tracker.domain.entries import (
    MealEntry,
    MeditationEntry,
    WaterEntry,
    WorkoutEntry,
)
from wellness_tracker.services.aggregation import (
    aggregate,
    aggregate_meals,
    aggregate_workouts,
    day_bounds,
    entries_for_day,
)

USER = uuid4()
NOON = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


def _meal(calories: float, protein: float | None = None, at=NOON) -> MealEntry:
    return MealEntry(
        id=uuid4(),
        user_id=USER,
        name="Meal",
        calories=calories,
        protein=protein,
        carbs=None,
        fat=None,
        fiber=None,
        meal_type=None,
        logged_at=at,
    )


def _workout(minutes: int, burned: float) -> WorkoutEntry:
    return WorkoutEntry(
        id=uuid4(),
        user_id=USER,
        name="Run",
        type="Running (Moderate)",
        duration_minutes=minutes,
        calories_burned=burned,
        notes=None,
        logged_at=NOON,
    )


def test_aggregate_empty_returns_zero_totals() -> None:
    totals = aggregate([])

    assert totals.calories == 0
    assert totals.calories_burned == 0
    assert totals.meditation_minutes == 0
    assert totals.water_glasses == 0


def test_aggregate_sums_each_tracker() -> None:
    entries = [
        _meal(300),
        _meal(450),
        _workout(30, 300),
        MeditationEntry(uuid4(), USER, 10, "breathing", None, NOON),
        MeditationEntry(uuid4(), USER, 15, None, None, NOON),
        WaterEntry(uuid4(), USER, 3, NOON),
        WaterEntry(uuid4(), USER, 2, NOON),
    ]

    totals = aggregate(entries)

    assert totals.calories == 750
    assert totals.calories_burned == 300
    assert totals.meditation_minutes == 25
    assert totals.water_glasses == 5


def test_aggregate_is_order_independent_and_does_not_mutate() -> None:
    entries = [_meal(100), _workout(20, 200), WaterEntry(uuid4(), USER, 1, NOON)]
    snapshot = list(entries)

    forward = aggregate(entries)
    backward = aggregate(list(reversed(entries)))

    assert forward == backward
    assert entries == snapshot


def test_missing_nutrients_count_as_zero() -> None:
    totals = aggregate_meals([_meal(200, protein=None), _meal(100, protein=5)])

    assert totals.calories == 300
    assert totals.protein == 5
    assert totals.fiber == 0


def test_aggregate_workouts_counts_sessions() -> None:
    totals = aggregate_workouts([_workout(30, 300), _workout(15, 60)])

    assert totals.total_minutes == 45
    assert totals.total_calories == 360
    assert totals.workout_count == 2


def test_day_bounds_follow_local_midnight() -> None:
    tz = ZoneInfo("Asia/Kolkata")
    start, end = day_bounds(date(2024, 3, 15), tz)

    assert start.astimezone(UTC) == datetime(2024, 3, 14, 18, 30, tzinfo=UTC)
    assert end.astimezone(UTC) == datetime(2024, 3, 15, 18, 30, tzinfo=UTC)


def test_entries_for_day_uses_local_date() -> None:
    tz = ZoneInfo("America/New_York")
    late_utc = datetime(2024, 3, 16, 2, 0, tzinfo=UTC)
    meals = [_meal(100, at=late_utc), _meal(200, at=NOON)]

    kept = entries_for_day(meals, date(2024, 3, 15), tz)

    assert [meal.calories for meal in kept] == [100, 200]

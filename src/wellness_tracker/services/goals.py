"""Goal progress evaluation."""

from collections.abc import Iterable

from wellness_tracker.domain.profiles import DailyGoals, Profile
from wellness_tracker.domain.stats import DailyTotals, GoalProgress, TrackerProgress
from wellness_tracker.errors import ValidationError
from wellness_tracker.services.metrics import round_half_up

MAX_PERCENTAGE = 100.0

DEFAULT_GOALS = DailyGoals(
    calories=2000,
    calories_burned=500,
    meditation_minutes=20,
    water_glasses=8,
)


def progress(current: float, goal: float) -> float:
    """Percentage of the goal reached, capped at 100."""
    if goal <= 0:
        raise ValidationError("goal must be positive")
    return min(current / goal * 100, MAX_PERCENTAGE)


def composite_score(percentages: Iterable[float]) -> int:
    """Mean of the capped percentages, rounded half-up."""
    capped = [min(value, MAX_PERCENTAGE) for value in percentages]
    if not capped:
        return 0
    return int(round_half_up(sum(capped) / len(capped)))


def resolve_goals(
    profile: Profile | None, defaults: DailyGoals = DEFAULT_GOALS
) -> DailyGoals:
    """Return effective goals, substituting defaults for unset or zero goals."""
    if profile is None:
        return defaults
    return DailyGoals(
        calories=_positive_or(profile.daily_calorie_goal, defaults.calories),
        calories_burned=defaults.calories_burned,
        meditation_minutes=_positive_or(
            profile.daily_meditation_goal, defaults.meditation_minutes
        ),
        water_glasses=_positive_or(profile.daily_water_goal, defaults.water_glasses),
    )


def evaluate(totals: DailyTotals, goals: DailyGoals) -> GoalProgress:
    """Compute per-tracker progress and the composite score."""
    trackers = [
        _tracker(totals.calories, goals.calories),
        _tracker(totals.calories_burned, goals.calories_burned),
        _tracker(totals.meditation_minutes, goals.meditation_minutes),
        _tracker(totals.water_glasses, goals.water_glasses),
    ]
    calories, burned, meditation, water = trackers
    return GoalProgress(
        calories=calories,
        calories_burned=burned,
        meditation_minutes=meditation,
        water_glasses=water,
        composite_score=composite_score(t.percentage for t in trackers),
    )


def _tracker(current: float, goal: float) -> TrackerProgress:
    return TrackerProgress(
        current=current, goal=goal, percentage=progress(current, goal)
    )


def _positive_or(value: int | None, default: int) -> int:
    if value is None or value <= 0:
        return default
    return value

"""Daily tracker: fetch a day's entries and score them against goals."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID
from zoneinfo import ZoneInfo

from wellness_tracker.domain.entries import (
    EntryKind,
    MealEntry,
    MeditationEntry,
    WaterEntry,
    WorkoutEntry,
)
from wellness_tracker.domain.profiles import DailyGoals
from wellness_tracker.domain.stats import (
    DailyTotals,
    GoalProgress,
    NutrientTotals,
    WorkoutTotals,
)
from wellness_tracker.services.aggregation import (
    aggregate_meals,
    aggregate_workouts,
    day_bounds,
    entries_for_day,
    total_meditation_minutes,
    total_water_glasses,
)
from wellness_tracker.services.entries import EntryRepository, utc_now
from wellness_tracker.services.goals import evaluate
from wellness_tracker.services.profiles import ProfileService

logger = logging.getLogger(__name__)


@dataclass
class DayView:
    """Most recently applied entries for one user and day.

    Each refresh takes a new generation number; a result is applied only if
    no later refresh has started, so a slow fetch never overwrites newer data.
    """

    meals: list[MealEntry] = field(default_factory=list)
    workouts: list[WorkoutEntry] = field(default_factory=list)
    meditations: list[MeditationEntry] = field(default_factory=list)
    water: list[WaterEntry] = field(default_factory=list)
    generation: int = 0
    applied_generation: int = 0

    def begin_refresh(self) -> int:
        self.generation += 1
        return self.generation

    def apply(  # noqa: PLR0913
        self,
        generation: int,
        meals: Sequence[MealEntry],
        workouts: Sequence[WorkoutEntry],
        meditations: Sequence[MeditationEntry],
        water: Sequence[WaterEntry],
    ) -> bool:
        """Replace every list at once; returns False for a superseded refresh."""
        if generation != self.generation:
            return False
        self.meals = list(meals)
        self.workouts = list(workouts)
        self.meditations = list(meditations)
        self.water = list(water)
        self.applied_generation = generation
        return True


@dataclass(frozen=True)
class DaySummary:
    """A day's entries with their totals and goal progress."""

    day: date
    timezone: str
    meals: list[MealEntry]
    workouts: list[WorkoutEntry]
    meditations: list[MeditationEntry]
    water: list[WaterEntry]
    totals: DailyTotals
    meal_totals: NutrientTotals
    workout_totals: WorkoutTotals
    goals: DailyGoals
    progress: GoalProgress


@dataclass
class TrackerService:
    """Service for a user's daily totals in their timezone."""

    repository: EntryRepository
    profile_service: ProfileService
    clock: Callable[[], datetime] = utc_now

    def local_today(self, timezone_name: str) -> date:
        return self.clock().astimezone(ZoneInfo(timezone_name)).date()

    async def refresh(
        self,
        view: DayView,
        user_id: UUID,
        timezone_name: str,
        day: date | None = None,
    ) -> bool:
        """Fetch the four entry lists concurrently and apply them to the view."""
        tz = ZoneInfo(timezone_name)
        target = day or self.local_today(timezone_name)
        start, end = day_bounds(target, tz)
        generation = view.begin_refresh()
        meals, workouts, meditations, water = await asyncio.gather(
            self._list(EntryKind.MEAL, user_id, start, end),
            self._list(EntryKind.WORKOUT, user_id, start, end),
            self._list(EntryKind.MEDITATION, user_id, start, end),
            self._list(EntryKind.WATER, user_id, start, end),
        )
        applied = view.apply(
            generation,
            entries_for_day(meals, target, tz),
            entries_for_day(workouts, target, tz),
            entries_for_day(meditations, target, tz),
            entries_for_day(water, target, tz),
        )
        if not applied:
            logger.info(
                "Discarded superseded refresh",
                extra={"user_id": str(user_id), "generation": generation},
            )
        return applied

    async def get_day(
        self, user_id: UUID, timezone_name: str, day: date | None = None
    ) -> DaySummary:
        """Return the day's entries, totals and progress towards goals."""
        target = day or self.local_today(timezone_name)
        view = DayView()
        _, goals = await asyncio.gather(
            self.refresh(view, user_id, timezone_name, target),
            asyncio.to_thread(self.profile_service.goals_for, user_id),
        )
        return summarize(view, target, timezone_name, goals)

    async def _list(
        self, kind: EntryKind, user_id: UUID, start: datetime, end: datetime
    ) -> list:
        return await asyncio.to_thread(
            self.repository.list_for_range, kind, user_id, start, end
        )


def summarize(
    view: DayView, day: date, timezone_name: str, goals: DailyGoals
) -> DaySummary:
    """Aggregate the view's entries and evaluate them against goals."""
    meal_totals = aggregate_meals(view.meals)
    workout_totals = aggregate_workouts(view.workouts)
    totals = DailyTotals(
        calories=meal_totals.calories,
        calories_burned=workout_totals.total_calories,
        meditation_minutes=total_meditation_minutes(view.meditations),
        water_glasses=total_water_glasses(view.water),
    )
    return DaySummary(
        day=day,
        timezone=timezone_name,
        meals=list(view.meals),
        workouts=list(view.workouts),
        meditations=list(view.meditations),
        water=list(view.water),
        totals=totals,
        meal_totals=meal_totals,
        workout_totals=workout_totals,
        goals=goals,
        progress=evaluate(totals, goals),
    )

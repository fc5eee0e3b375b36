"""Service that validates and persists logged entries."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from wellness_tracker.data.foods import FOOD_CATALOG
from wellness_tracker.data.workouts import WORKOUT_CATALOG
from wellness_tracker.domain.catalog import Catalog, Food, WorkoutType
from wellness_tracker.domain.entries import (
    EntryKind,
    LogEntry,
    MealEntry,
    MeditationEntry,
    MeditationType,
    WaterEntry,
    WorkoutEntry,
)
from wellness_tracker.domain.stats import NutrientTotals
from wellness_tracker.errors import ValidationError
from wellness_tracker.services.composer import (
    ParsedSelection,
    Selection,
    estimate_workout_calories,
    meal_record,
    meal_records_per_item,
    parse_selection,
)

logger = logging.getLogger(__name__)

MAX_GLASSES_PER_ENTRY = 20


class EntryRepository(Protocol):
    """Persistence interface for logged entries of every kind."""

    def insert(self, kind: EntryKind, record: dict[str, object]) -> LogEntry:
        """Insert one row and return the stored entry."""

    def insert_many(
        self, kind: EntryKind, records: list[dict[str, object]]
    ) -> list[LogEntry]:
        """Insert several rows and return the stored entries."""

    def update(
        self,
        kind: EntryKind,
        user_id: UUID,
        entry_id: UUID,
        record: dict[str, object],
    ) -> LogEntry:
        """Update a row owned by the user and return the stored entry."""

    def delete(self, kind: EntryKind, user_id: UUID, entry_id: UUID) -> None:
        """Delete a row owned by the user."""

    def list_for_range(
        self, kind: EntryKind, user_id: UUID, start: datetime, end: datetime
    ) -> list[LogEntry]:
        """Return entries logged in [start, end), newest first."""


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class EntryService:
    """Create, update and delete meals, workouts, meditation and water."""

    repository: EntryRepository
    foods: Catalog[Food] = FOOD_CATALOG
    workouts: Catalog[WorkoutType] = WORKOUT_CATALOG
    clock: Callable[[], datetime] = utc_now

    def log_meal(
        self,
        user_id: UUID,
        selection: Selection,
        meal_type: str | None = None,
        logged_at: datetime | None = None,
    ) -> MealEntry:
        """Persist the selection as one combined meal."""
        record = meal_record(selection, meal_type)
        entry = self.repository.insert(
            EntryKind.MEAL, self._owned(record, user_id, logged_at)
        )
        logger.info("Logged meal", extra={"user_id": str(user_id)})
        return entry

    def log_meal_items(
        self,
        user_id: UUID,
        selection: Selection,
        meal_type: str | None = None,
        logged_at: datetime | None = None,
    ) -> list[MealEntry]:
        """Persist one meal per selected food."""
        records = [
            self._owned(record, user_id, logged_at)
            for record in meal_records_per_item(selection, meal_type)
        ]
        return self.repository.insert_many(EntryKind.MEAL, records)

    def update_meal(
        self,
        user_id: UUID,
        entry_id: UUID,
        selection: Selection,
        meal_type: str | None = None,
    ) -> MealEntry:
        """Replace a meal's name and nutrients with a new selection."""
        record = meal_record(selection, meal_type)
        return self.repository.update(EntryKind.MEAL, user_id, entry_id, record)

    def resolve_food(self, food_id: str) -> Food:
        food = self.foods.get(food_id)
        if food is None:
            raise ValidationError(f"Unknown food: {food_id!r}")
        return food

    def edit_selection(self, name: str, stored: NutrientTotals) -> ParsedSelection:
        """Recover the selection behind a stored meal for editing."""
        return parse_selection(name, self.foods, stored)

    def log_workout(  # noqa: PLR0913
        self,
        user_id: UUID,
        workout_type: str,
        duration_minutes: int,
        name: str | None = None,
        notes: str | None = None,
        logged_at: datetime | None = None,
    ) -> WorkoutEntry:
        """Persist a workout with its estimated calorie burn."""
        record = self._workout_record(workout_type, duration_minutes, name, notes)
        entry = self.repository.insert(
            EntryKind.WORKOUT, self._owned(record, user_id, logged_at)
        )
        logger.info("Logged workout", extra={"user_id": str(user_id)})
        return entry

    def update_workout(  # noqa: PLR0913
        self,
        user_id: UUID,
        entry_id: UUID,
        workout_type: str,
        duration_minutes: int,
        name: str | None = None,
        notes: str | None = None,
    ) -> WorkoutEntry:
        """Replace a workout and recompute its calorie burn."""
        record = self._workout_record(workout_type, duration_minutes, name, notes)
        return self.repository.update(EntryKind.WORKOUT, user_id, entry_id, record)

    def log_meditation(
        self,
        user_id: UUID,
        duration_minutes: int,
        meditation_type: MeditationType | str = MeditationType.MINDFULNESS,
        notes: str | None = None,
        logged_at: datetime | None = None,
    ) -> MeditationEntry:
        """Persist a meditation session."""
        record = _meditation_record(duration_minutes, meditation_type, notes)
        entry = self.repository.insert(
            EntryKind.MEDITATION, self._owned(record, user_id, logged_at)
        )
        logger.info("Logged meditation", extra={"user_id": str(user_id)})
        return entry

    def update_meditation(
        self,
        user_id: UUID,
        entry_id: UUID,
        duration_minutes: int,
        meditation_type: MeditationType | str = MeditationType.MINDFULNESS,
        notes: str | None = None,
    ) -> MeditationEntry:
        record = _meditation_record(duration_minutes, meditation_type, notes)
        return self.repository.update(
            EntryKind.MEDITATION, user_id, entry_id, record
        )

    def log_water(
        self, user_id: UUID, glasses: int, logged_at: datetime | None = None
    ) -> WaterEntry:
        """Persist a water intake."""
        record = {"glasses": _validate_glasses(glasses)}
        entry = self.repository.insert(
            EntryKind.WATER, self._owned(record, user_id, logged_at)
        )
        logger.info("Logged water", extra={"user_id": str(user_id)})
        return entry

    def update_water(self, user_id: UUID, entry_id: UUID, glasses: int) -> WaterEntry:
        record = {"glasses": _validate_glasses(glasses)}
        return self.repository.update(EntryKind.WATER, user_id, entry_id, record)

    def delete_entry(self, kind: EntryKind, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry owned by the user."""
        self.repository.delete(kind, user_id, entry_id)
        logger.info(
            "Deleted %s entry", kind.value, extra={"user_id": str(user_id)}
        )

    def _workout_record(
        self,
        workout_type: str,
        duration_minutes: int,
        name: str | None,
        notes: str | None,
    ) -> dict[str, object]:
        workout = self.workouts.find_by_name(workout_type) or self.workouts.get(
            workout_type
        )
        if workout is None:
            raise ValidationError(f"Unknown workout type: {workout_type!r}")
        duration = _require_positive_int("duration_minutes", duration_minutes)
        return {
            "name": (name or "").strip() or workout.name,
            "type": workout.name,
            "duration_minutes": duration,
            "calories_burned": estimate_workout_calories(workout, duration),
            "notes": notes or None,
        }

    def _owned(
        self, record: dict[str, object], user_id: UUID, logged_at: datetime | None
    ) -> dict[str, object]:
        timestamp = logged_at or self.clock()
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        return {
            **record,
            "user_id": str(user_id),
            "logged_at": timestamp.astimezone(UTC).isoformat(),
        }


def _meditation_record(
    duration_minutes: int, meditation_type: MeditationType | str, notes: str | None
) -> dict[str, object]:
    try:
        resolved = MeditationType(meditation_type)
    except ValueError as exc:
        raise ValidationError(f"Unknown meditation type: {meditation_type!r}") from exc
    return {
        "duration_minutes": _require_positive_int("duration_minutes", duration_minutes),
        "type": resolved.value,
        "notes": notes or None,
    }


def _validate_glasses(glasses: int) -> int:
    count = _require_positive_int("glasses", glasses)
    if count > MAX_GLASSES_PER_ENTRY:
        raise ValidationError(
            f"glasses must be at most {MAX_GLASSES_PER_ENTRY} per entry"
        )
    return count


def _require_positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(f"{name} must be a number")
    if not math.isfinite(value) or value <= 0 or value != int(value):
        raise ValidationError(f"{name} must be a positive whole number")
    return int(value)

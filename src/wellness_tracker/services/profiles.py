"""Profile onboarding, updates and goal resolution."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from wellness_tracker.domain.profiles import (
    ActivityLevel,
    BodyMetrics,
    DailyGoals,
    DerivedMetrics,
    Gender,
    Objective,
    Profile,
)
from wellness_tracker.errors import ValidationError
from wellness_tracker.services.goals import DEFAULT_GOALS, resolve_goals
from wellness_tracker.services.metrics import compute_metrics

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile, if one exists."""

    def upsert_profile(self, record: dict[str, object]) -> Profile:
        """Insert or replace the profile keyed by user id."""


@dataclass(frozen=True)
class ProfileUpdate:
    """Profile fields submitted by the user; unset fields are None."""

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


@dataclass
class ProfileService:
    """Application service for user profiles."""

    repository: ProfileRepository
    default_goals: DailyGoals = DEFAULT_GOALS

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.repository.get_profile(user_id)

    def needs_onboarding(self, user_id: UUID) -> bool:
        """Return True until the user has a profile with a display name."""
        profile = self.repository.get_profile(user_id)
        return profile is None or not profile.display_name

    def complete_onboarding(self, user_id: UUID, update: ProfileUpdate) -> Profile:
        """Store the first profile; every biometric field is required."""
        missing = [
            name
            for name in (
                "display_name",
                "age",
                "height",
                "weight",
                "gender",
                "activity_level",
                "goal",
            )
            if getattr(update, name) in (None, "")
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        return self.update_profile(user_id, update)

    def update_profile(self, user_id: UUID, update: ProfileUpdate) -> Profile:
        """Recompute derived metrics and upsert the profile."""
        _validate_optional_goals(update)
        metrics = derive_metrics(update)
        calorie_goal = update.daily_calorie_goal or (
            metrics.daily_calorie_goal if metrics else self.default_goals.calories
        )
        record: dict[str, object] = {
            "user_id": str(user_id),
            "display_name": update.display_name,
            "age": update.age,
            "height": update.height,
            "weight": update.weight,
            "gender": update.gender,
            "activity_level": (
                ActivityLevel.parse(update.activity_level).value
                if update.activity_level
                else None
            ),
            "goal": Objective.parse(update.goal).value if update.goal else None,
            "bmr": metrics.bmr if metrics else None,
            "tdee": metrics.tdee if metrics else None,
            "bmi": metrics.bmi if metrics else None,
            "daily_calorie_goal": calorie_goal,
            "daily_water_goal": update.daily_water_goal
            or self.default_goals.water_glasses,
            "daily_meditation_goal": update.daily_meditation_goal
            or self.default_goals.meditation_minutes,
        }
        profile = self.repository.upsert_profile(record)
        logger.info("Saved profile", extra={"user_id": str(user_id)})
        return profile

    def goals_for(self, user_id: UUID) -> DailyGoals:
        """Return the user's effective goals."""
        return resolve_goals(self.repository.get_profile(user_id), self.default_goals)


def derive_metrics(update: ProfileUpdate) -> DerivedMetrics | None:
    """Compute metrics when all biometrics are present, else None."""
    if (
        not update.age
        or not update.height
        or not update.weight
        or not update.gender
        or not update.activity_level
    ):
        return None
    return compute_metrics(
        BodyMetrics(
            weight_kg=update.weight,
            height_cm=update.height,
            age=update.age,
            gender=Gender.parse(update.gender),
            activity_level=ActivityLevel.parse(update.activity_level),
            objective=Objective.parse(update.goal or Objective.MAINTAIN_WEIGHT),
        )
    )


def _validate_optional_goals(update: ProfileUpdate) -> None:
    for name in ("daily_calorie_goal", "daily_water_goal", "daily_meditation_goal"):
        value = getattr(update, name)
        if value is not None and value <= 0:
            raise ValidationError(f"{name} must be positive")

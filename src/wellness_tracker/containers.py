"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from wellness_tracker.adapters.supabase_entry_repository import (
    SupabaseEntryRepository,
)
from wellness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from wellness_tracker.config import Settings
from wellness_tracker.domain.profiles import DailyGoals
from wellness_tracker.services.entries import EntryService
from wellness_tracker.services.profiles import ProfileService
from wellness_tracker.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService
    profile_service: ProfileService
    tracker_service: TrackerService


def default_goals(settings: Settings) -> DailyGoals:
    """Goals used when a profile sets none."""
    return DailyGoals(
        calories=settings.default_calorie_goal,
        calories_burned=settings.default_burn_goal,
        meditation_minutes=settings.default_meditation_goal,
        water_glasses=settings.default_water_goal,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_repository = SupabaseEntryRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    profile_service = ProfileService(
        profile_repository, default_goals=default_goals(resolved_settings)
    )
    return AppContainer(
        settings=resolved_settings,
        entry_service=EntryService(entry_repository),
        profile_service=profile_service,
        tracker_service=TrackerService(entry_repository, profile_service),
    )

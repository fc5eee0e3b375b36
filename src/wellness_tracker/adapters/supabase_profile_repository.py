"""Supabase repository for user profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from wellness_tracker.adapters.supabase_query import execute
from wellness_tracker.domain.profiles import Profile
from wellness_tracker.errors import BackendError
from wellness_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        rows = execute(
            self.client.table("profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1),
            "load profile",
        )
        if not rows:
            return None
        return Profile.from_row(rows[0])

    def upsert_profile(self, record: dict[str, object]) -> Profile:
        """Insert or replace the profile keyed by user id."""
        rows = execute(
            self.client.table("profiles").upsert(record, on_conflict="user_id"),
            "save profile",
        )
        if not rows:
            raise BackendError("Failed to save profile")
        return Profile.from_row(rows[0])

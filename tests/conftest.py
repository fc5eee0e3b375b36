"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from wellness_tracker.config import Settings
from wellness_tracker.containers import AppContainer
from wellness_tracker.domain.entries import EntryKind, LogEntry, entry_from_row
from wellness_tracker.domain.profiles import Profile
from wellness_tracker.errors import BackendError, EntryNotFoundError
from wellness_tracker.services.entries import EntryRepository, EntryService
from wellness_tracker.services.profiles import ProfileRepository, ProfileService
from wellness_tracker.services.tracker import TrackerService

FIXED_NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)
USER_ID = UUID("6f1c2b1e-3d4a-4c5b-9e8f-0a1b2c3d4e5f")


def fixed_clock() -> datetime:
    return FIXED_NOW


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    rows: dict[EntryKind, list[dict[str, object]]] = field(
        default_factory=lambda: {kind: [] for kind in EntryKind}
    )
    fail_writes: bool = False
    list_calls: list[EntryKind] = field(default_factory=list)

    def insert(self, kind: EntryKind, record: dict[str, object]) -> LogEntry:
        if self.fail_writes:
            raise BackendError(f"Failed to insert {kind.value}")
        row = {**record, "id": str(uuid4())}
        self.rows[kind].append(row)
        return entry_from_row(kind, row)

    def insert_many(
        self, kind: EntryKind, records: list[dict[str, object]]
    ) -> list[LogEntry]:
        if self.fail_writes:
            raise BackendError(f"Failed to insert {kind.value}")
        return [self.insert(kind, record) for record in records]

    def update(
        self,
        kind: EntryKind,
        user_id: UUID,
        entry_id: UUID,
        record: dict[str, object],
    ) -> LogEntry:
        if self.fail_writes:
            raise BackendError(f"Failed to update {kind.value}")
        for index, row in enumerate(self.rows[kind]):
            if row["id"] == str(entry_id) and row["user_id"] == str(user_id):
                updated = {**row, **record}
                self.rows[kind][index] = updated
                return entry_from_row(kind, updated)
        raise EntryNotFoundError(kind.table, entry_id)

    def delete(self, kind: EntryKind, user_id: UUID, entry_id: UUID) -> None:
        before = len(self.rows[kind])
        self.rows[kind] = [
            row
            for row in self.rows[kind]
            if not (row["id"] == str(entry_id) and row["user_id"] == str(user_id))
        ]
        if len(self.rows[kind]) == before:
            raise EntryNotFoundError(kind.table, entry_id)

    def list_for_range(
        self, kind: EntryKind, user_id: UUID, start: datetime, end: datetime
    ) -> list[LogEntry]:
        self.list_calls.append(kind)
        entries = [
            entry_from_row(kind, row)
            for row in self.rows[kind]
            if row["user_id"] == str(user_id)
        ]
        return sorted(
            (entry for entry in entries if start <= entry.logged_at < end),
            key=lambda entry: entry.logged_at,
            reverse=True,
        )


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def upsert_profile(self, record: dict[str, object]) -> Profile:
        profile = Profile.from_row(record)
        self.profiles[profile.user_id] = profile
        return profile


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service.role.key",
        api_token="api-token",
    )


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def entry_service(entry_repository: InMemoryEntryRepository) -> EntryService:
    return EntryService(entry_repository, clock=fixed_clock)


@pytest.fixture
def profile_service(profile_repository: InMemoryProfileRepository) -> ProfileService:
    return ProfileService(profile_repository)


@pytest.fixture
def tracker_service(
    entry_repository: InMemoryEntryRepository, profile_service: ProfileService
) -> TrackerService:
    return TrackerService(entry_repository, profile_service, clock=fixed_clock)


@pytest.fixture
def container(
    settings: Settings,
    entry_service: EntryService,
    profile_service: ProfileService,
    tracker_service: TrackerService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        entry_service=entry_service,
        profile_service=profile_service,
        tracker_service=tracker_service,
    )

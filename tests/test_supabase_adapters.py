"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import httpx
import pytest
from postgrest.exceptions import APIError

from wellness_tracker.adapters.supabase_entry_repository import (
    SupabaseEntryRepository,
)
from wellness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from wellness_tracker.domain.entries import EntryKind, MealEntry, WaterEntry
from wellness_tracker.errors import BackendError, EntryNotFoundError


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "delete": [],
            "upsert": [],
        }
    )
    error: Exception | None = None
    last_payload: object | None = None
    last_filters: list[tuple[str, str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None
    last_on_conflict: str | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("eq", column, value))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("gte", column, value))
        return self

    def lt(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append(("lt", column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        if self.error is not None:
            raise self.error
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _meal_row(**overrides) -> dict[str, object]:
    row = {
        "id": str(uuid4()),
        "user_id": str(uuid4()),
        "name": "Idli (2x)",
        "calories": 240,
        "protein": 8,
        "carbs": 48,
        "fat": 2,
        "fiber": None,
        "meal_type": "breakfast",
        "logged_at": "2024-03-15T08:00:00+00:00",
    }
    row.update(overrides)
    return row


def test_insert_returns_stored_entry() -> None:
    client = FakeSupabaseClient()
    client.table("meals").queue("insert", [_meal_row()])

    repository = SupabaseEntryRepository(client)
    entry = repository.insert(EntryKind.MEAL, {"name": "Idli (2x)"})

    assert isinstance(entry, MealEntry)
    assert entry.calories == 240
    assert entry.fiber is None
    assert entry.logged_at == datetime(2024, 3, 15, 8, 0, tzinfo=UTC)


def test_insert_with_empty_response_raises() -> None:
    client = FakeSupabaseClient()

    repository = SupabaseEntryRepository(client)

    with pytest.raises(BackendError):
        repository.insert(EntryKind.WATER, {"glasses": 1})


def test_insert_many_sends_one_request() -> None:
    client = FakeSupabaseClient()
    table = client.table("meals")
    table.queue("insert", [_meal_row(), _meal_row(name="Dosa (Plain) (1x)")])

    repository = SupabaseEntryRepository(client)
    entries = repository.insert_many(EntryKind.MEAL, [{"name": "a"}, {"name": "b"}])

    assert [entry.name for entry in entries] == ["Idli (2x)", "Dosa (Plain) (1x)"]
    assert table.last_payload == [{"name": "a"}, {"name": "b"}]


def test_api_error_becomes_backend_error() -> None:
    client = FakeSupabaseClient()
    client.table("water_intake").error = APIError(
        {"message": "permission denied", "code": "42501", "hint": "", "details": ""}
    )

    repository = SupabaseEntryRepository(client)

    with pytest.raises(BackendError):
        repository.insert(EntryKind.WATER, {"glasses": 1})


def test_transport_error_becomes_backend_error() -> None:
    client = FakeSupabaseClient()
    client.table("meals").error = httpx.ConnectError("connection refused")

    repository = SupabaseEntryRepository(client)

    with pytest.raises(BackendError):
        repository.list_for_range(
            EntryKind.MEAL,
            uuid4(),
            datetime(2024, 3, 15, tzinfo=UTC),
            datetime(2024, 3, 16, tzinfo=UTC),
        )


def test_update_is_scoped_to_user() -> None:
    client = FakeSupabaseClient()
    table = client.table("water_intake")
    user_id = uuid4()
    entry_id = uuid4()
    table.queue(
        "update",
        [
            {
                "id": str(entry_id),
                "user_id": str(user_id),
                "glasses": 3,
                "logged_at": "2024-03-15T08:00:00Z",
            }
        ],
    )

    repository = SupabaseEntryRepository(client)
    entry = repository.update(EntryKind.WATER, user_id, entry_id, {"glasses": 3})

    assert isinstance(entry, WaterEntry)
    assert entry.glasses == 3
    assert ("eq", "id", str(entry_id)) in table.last_filters
    assert ("eq", "user_id", str(user_id)) in table.last_filters


def test_update_or_delete_without_match_raises_not_found() -> None:
    client = FakeSupabaseClient()

    repository = SupabaseEntryRepository(client)

    with pytest.raises(EntryNotFoundError):
        repository.update(EntryKind.WORKOUT, uuid4(), uuid4(), {"notes": "x"})
    with pytest.raises(EntryNotFoundError):
        repository.delete(EntryKind.MEDITATION, uuid4(), uuid4())


def test_list_for_range_filters_and_orders_newest_first() -> None:
    client = FakeSupabaseClient()
    table = client.table("meals")
    table.queue("select", [_meal_row(), _meal_row(calories=None)])
    start = datetime(2024, 3, 15, tzinfo=UTC)
    end = datetime(2024, 3, 16, tzinfo=UTC)

    repository = SupabaseEntryRepository(client)
    entries = repository.list_for_range(EntryKind.MEAL, uuid4(), start, end)

    assert len(entries) == 2
    assert entries[1].calories == 0
    assert ("gte", "logged_at", start.isoformat()) in table.last_filters
    assert ("lt", "logged_at", end.isoformat()) in table.last_filters
    assert table.last_order == ("logged_at", True)


def test_profile_repository_get_and_upsert() -> None:
    client = FakeSupabaseClient()
    table = client.table("profiles")
    user_id = uuid4()
    row = {
        "user_id": str(user_id),
        "display_name": "Ravi",
        "age": 25,
        "height": 170,
        "weight": 70,
        "gender": "male",
        "activity_level": "sedentary",
        "goal": "lose_weight",
        "bmr": 1643,
        "tdee": 1971,
        "bmi": 24.2,
        "daily_calorie_goal": 1471,
        "daily_water_goal": 8,
        "daily_meditation_goal": 20,
    }
    table.queue("select", [row])
    table.queue("upsert", [row])

    repository = SupabaseProfileRepository(client)
    fetched = repository.get_profile(user_id)
    saved = repository.upsert_profile(row)

    assert fetched is not None
    assert fetched.daily_calorie_goal == 1471
    assert saved.user_id == user_id
    assert table.last_on_conflict == "user_id"
    assert repository.get_profile(uuid4()) is None

"""Supabase repository for meals, workouts, meditation and water."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from wellness_tracker.adapters.supabase_query import execute
from wellness_tracker.domain.entries import EntryKind, LogEntry, entry_from_row
from wellness_tracker.errors import BackendError, EntryNotFoundError
from wellness_tracker.services.entries import EntryRepository


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for logged entries."""

    client: Client

    def insert(self, kind: EntryKind, record: dict[str, object]) -> LogEntry:
        """Insert a row and return it as stored."""
        rows = execute(
            self.client.table(kind.table).insert(record), f"insert {kind.value}"
        )
        if not rows:
            raise BackendError(f"Failed to insert {kind.value}")
        return entry_from_row(kind, rows[0])

    def insert_many(
        self, kind: EntryKind, records: list[dict[str, object]]
    ) -> list[LogEntry]:
        """Insert several rows in one request."""
        if not records:
            return []
        rows = execute(
            self.client.table(kind.table).insert(records), f"insert {kind.value}"
        )
        if len(rows) != len(records):
            raise BackendError(f"Failed to insert {kind.value}")
        return [entry_from_row(kind, row) for row in rows]

    def update(
        self,
        kind: EntryKind,
        user_id: UUID,
        entry_id: UUID,
        record: dict[str, object],
    ) -> LogEntry:
        """Update a row owned by the user."""
        rows = execute(
            self.client.table(kind.table)
            .update(record)
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id)),
            f"update {kind.value}",
        )
        if not rows:
            raise EntryNotFoundError(kind.table, entry_id)
        return entry_from_row(kind, rows[0])

    def delete(self, kind: EntryKind, user_id: UUID, entry_id: UUID) -> None:
        """Delete a row owned by the user."""
        rows = execute(
            self.client.table(kind.table)
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id)),
            f"delete {kind.value}",
        )
        if not rows:
            raise EntryNotFoundError(kind.table, entry_id)

    def list_for_range(
        self, kind: EntryKind, user_id: UUID, start: datetime, end: datetime
    ) -> list[LogEntry]:
        """Return entries logged in [start, end), newest first."""
        rows = execute(
            self.client.table(kind.table)
            .select("*")
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=True),
            f"list {kind.value}",
        )
        return [entry_from_row(kind, row) for row in rows]

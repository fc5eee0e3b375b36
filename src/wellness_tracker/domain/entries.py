"""Domain models for logged wellness entries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID


class EntryKind(Enum):
    """Kinds of entries a user can log; each kind lives in its own table."""

    MEAL = "meal"
    WORKOUT = "workout"
    WATER = "water"
    MEDITATION = "meditation"

    @property
    def table(self) -> str:
        """Backend table holding entries of this kind."""
        return _TABLES[self]


_TABLES = {
    EntryKind.MEAL: "meals",
    EntryKind.WORKOUT: "workouts",
    EntryKind.WATER: "water_intake",
    EntryKind.MEDITATION: "meditation_sessions",
}


class MeditationType(Enum):
    """Meditation modalities offered when logging a session."""

    MINDFULNESS = "mindfulness"
    BREATHING = "breathing"
    BODY_SCAN = "body_scan"
    LOVING_KINDNESS = "loving_kindness"
    VISUALIZATION = "visualization"
    MANTRA = "mantra"
    MOVEMENT = "movement"
    OTHER = "other"


@dataclass(frozen=True)
class MealEntry:
    """A logged meal with summed nutrients."""

    id: UUID
    user_id: UUID
    name: str
    calories: float
    protein: float | None
    carbs: float | None
    fat: float | None
    fiber: float | None
    meal_type: str | None
    logged_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, object]) -> "MealEntry":
        return cls(
            id=UUID(str(row["id"])),
            user_id=UUID(str(row["user_id"])),
            name=str(row.get("name") or ""),
            calories=_to_float(row.get("calories")) or 0.0,
            protein=_to_float(row.get("protein")),
            carbs=_to_float(row.get("carbs")),
            fat=_to_float(row.get("fat")),
            fiber=_to_float(row.get("fiber")),
            meal_type=_to_str(row.get("meal_type")),
            logged_at=parse_timestamp(row.get("logged_at")),
        )


@dataclass(frozen=True)
class WorkoutEntry:
    """A logged workout with its estimated burn."""

    id: UUID
    user_id: UUID
    name: str
    type: str
    duration_minutes: int
    calories_burned: float
    notes: str | None
    logged_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, object]) -> "WorkoutEntry":
        return cls(
            id=UUID(str(row["id"])),
            user_id=UUID(str(row["user_id"])),
            name=str(row.get("name") or ""),
            type=str(row.get("type") or ""),
            duration_minutes=int(_to_float(row.get("duration_minutes")) or 0),
            calories_burned=_to_float(row.get("calories_burned")) or 0.0,
            notes=_to_str(row.get("notes")),
            logged_at=parse_timestamp(row.get("logged_at")),
        )


@dataclass(frozen=True)
class MeditationEntry:
    """A logged meditation session."""

    id: UUID
    user_id: UUID
    duration_minutes: int
    type: str | None
    notes: str | None
    logged_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, object]) -> "MeditationEntry":
        return cls(
            id=UUID(str(row["id"])),
            user_id=UUID(str(row["user_id"])),
            duration_minutes=int(_to_float(row.get("duration_minutes")) or 0),
            type=_to_str(row.get("type")),
            notes=_to_str(row.get("notes")),
            logged_at=parse_timestamp(row.get("logged_at")),
        )


@dataclass(frozen=True)
class WaterEntry:
    """A logged number of glasses of water."""

    id: UUID
    user_id: UUID
    glasses: int
    logged_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, object]) -> "WaterEntry":
        return cls(
            id=UUID(str(row["id"])),
            user_id=UUID(str(row["user_id"])),
            glasses=int(_to_float(row.get("glasses")) or 0),
            logged_at=parse_timestamp(row.get("logged_at")),
        )


LogEntry = MealEntry | WorkoutEntry | MeditationEntry | WaterEntry

_ENTRY_TYPES: dict[EntryKind, type[LogEntry]] = {
    EntryKind.MEAL: MealEntry,
    EntryKind.WORKOUT: WorkoutEntry,
    EntryKind.WATER: WaterEntry,
    EntryKind.MEDITATION: MeditationEntry,
}


def entry_from_row(kind: EntryKind, row: dict[str, object]) -> LogEntry:
    """Build the domain entry for a backend row of the given kind."""
    return _ENTRY_TYPES[kind].from_row(row)


def parse_timestamp(value: object) -> datetime:
    """Parse an ISO-8601 timestamp, assuming UTC when no offset is present."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        parsed = datetime.fromisoformat(value)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _to_float(value: object) -> float | None:
    if value is None:
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _to_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)

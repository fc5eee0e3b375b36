"""Domain models for user profiles, biometrics and goals."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from wellness_tracker.errors import ValidationError


class Gender(Enum):
    """Gender as used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: "str | Gender") -> "Gender":
        """Return the gender for a stored value; unknown values map to OTHER."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).lower())
        except ValueError:
            return cls.OTHER


class ActivityLevel(Enum):
    """Activity levels with their TDEE multipliers."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    @classmethod
    def parse(cls, raw: "str | ActivityLevel") -> "ActivityLevel":
        """Return the level for a stored value, accepting legacy spellings."""
        if isinstance(raw, cls):
            return raw
        value = _ACTIVITY_ALIASES.get(str(raw), str(raw))
        try:
            return cls(value)
        except ValueError as exc:
            raise ValidationError(f"Unknown activity level: {raw!r}") from exc


_ACTIVITY_ALIASES = {"extremely_active": "extra_active"}


class Objective(Enum):
    """Primary body-weight objective."""

    LOSE_WEIGHT = "lose_weight"
    MAINTAIN_WEIGHT = "maintain_weight"
    GAIN_WEIGHT = "gain_weight"

    @classmethod
    def parse(cls, raw: "str | Objective") -> "Objective":
        """Return the objective for a stored value, accepting short spellings."""
        if isinstance(raw, cls):
            return raw
        value = _OBJECTIVE_ALIASES.get(str(raw), str(raw))
        try:
            return cls(value)
        except ValueError as exc:
            raise ValidationError(f"Unknown objective: {raw!r}") from exc


_OBJECTIVE_ALIASES = {
    "lose": "lose_weight",
    "maintain": "maintain_weight",
    "gain": "gain_weight",
}


@dataclass(frozen=True)
class BodyMetrics:
    """Biometric inputs for the metric calculator."""

    weight_kg: float
    height_cm: float
    age: int
    gender: Gender
    activity_level: ActivityLevel
    objective: Objective


@dataclass(frozen=True)
class DerivedMetrics:
    """Rounded metrics derived from biometrics."""

    bmr: int
    tdee: int
    bmi: float
    daily_calorie_goal: int


@dataclass(frozen=True)
class DailyGoals:
    """Effective daily goals, always positive."""

    calories: int
    calories_burned: int
    meditation_minutes: int
    water_glasses: int


@dataclass(frozen=True)
class Profile:
    """Stored user profile."""

    user_id: UUID
    display_name: str | None
    age: int | None
    height: float | None
    weight: float | None
    gender: str | None
    activity_level: str | None
    goal: str | None
    bmr: float | None
    tdee: float | None
    bmi: float | None
    daily_calorie_goal: int | None
    daily_water_goal: int | None
    daily_meditation_goal: int | None

    @classmethod
    def from_row(cls, row: dict[str, object]) -> "Profile":
        return cls(
            user_id=UUID(str(row["user_id"])),
            display_name=_opt_str(row.get("display_name")),
            age=_opt_int(row.get("age")),
            height=_opt_float(row.get("height")),
            weight=_opt_float(row.get("weight")),
            gender=_opt_str(row.get("gender")),
            activity_level=_opt_str(row.get("activity_level")),
            goal=_opt_str(row.get("goal")),
            bmr=_opt_float(row.get("bmr")),
            tdee=_opt_float(row.get("tdee")),
            bmi=_opt_float(row.get("bmi")),
            daily_calorie_goal=_opt_int(row.get("daily_calorie_goal")),
            daily_water_goal=_opt_int(row.get("daily_water_goal")),
            daily_meditation_goal=_opt_int(row.get("daily_meditation_goal")),
        )


def _opt_str(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _opt_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None


def _opt_int(value: object) -> int | None:
    if isinstance(value, int | float):
        return int(value)
    return None

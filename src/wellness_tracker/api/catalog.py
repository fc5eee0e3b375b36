"""Read-only catalog endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from wellness_tracker.data.foods import FOOD_CATALOG
from wellness_tracker.data.workouts import WORKOUT_CATALOG
from wellness_tracker.domain.catalog import ALL_CATEGORIES

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/foods")
async def list_foods(q: str = "", category: str = ALL_CATEGORIES) -> dict[str, object]:
    """Search foods by name and category."""
    return {
        "categories": FOOD_CATALOG.categories(),
        "items": [asdict(food) for food in FOOD_CATALOG.search(q, category)],
    }


@router.get("/workouts")
async def list_workouts(
    q: str = "", category: str = ALL_CATEGORIES
) -> dict[str, object]:
    """Search workout types by name and category."""
    return {
        "categories": WORKOUT_CATALOG.categories(),
        "items": [asdict(workout) for workout in WORKOUT_CATALOG.search(q, category)],
    }

"""Compose catalog selections into meal entries and back."""

import logging
import re
from dataclasses import dataclass, replace

from wellness_tracker.domain.catalog import Catalog, Food, WorkoutType
from wellness_tracker.domain.stats import NutrientTotals
from wellness_tracker.errors import ValidationError
from wellness_tracker.services.metrics import round_half_up

logger = logging.getLogger(__name__)

CUSTOM_FOOD_ID = "custom"
CUSTOM_CATEGORY = "Custom"
NAME_SEPARATOR = ", "

_SEGMENT_PATTERN = re.compile(r"^(?P<name>.+?) \((?P<quantity>\d+)x\)$")
_SINGLE_SUFFIX = re.compile(r"(?: \(1x\))+$")


@dataclass(frozen=True)
class SelectedItem:
    """A catalog food with how many servings were picked."""

    food: Food
    quantity: int


Selection = tuple[SelectedItem, ...]


@dataclass(frozen=True)
class ParsedSelection:
    """Result of reading a stored meal name back into a selection."""

    items: Selection
    used_fallback: bool


def add_item(selection: Selection, food: Food) -> Selection:
    """Add one serving of the food, appending it if not yet selected."""
    for index, item in enumerate(selection):
        if item.food.id == food.id:
            bumped = replace(item, quantity=item.quantity + 1)
            return (*selection[:index], bumped, *selection[index + 1 :])
    return (*selection, SelectedItem(food=food, quantity=1))


def set_quantity(selection: Selection, food_id: str, quantity: int) -> Selection:
    """Replace the quantity of a selected food; zero or less removes it."""
    if quantity <= 0:
        return remove_item(selection, food_id)
    return tuple(
        replace(item, quantity=quantity) if item.food.id == food_id else item
        for item in selection
    )


def remove_item(selection: Selection, food_id: str) -> Selection:
    return tuple(item for item in selection if item.food.id != food_id)


def totals(selection: Selection) -> NutrientTotals:
    """Sum each nutrient times its quantity across the selection."""
    calories = protein = carbs = fat = fiber = 0.0
    for item in selection:
        calories += item.food.calories * item.quantity
        protein += item.food.protein * item.quantity
        carbs += item.food.carbs * item.quantity
        fat += item.food.fat * item.quantity
        fiber += item.food.fiber * item.quantity
    return NutrientTotals(
        calories=calories, protein=protein, carbs=carbs, fat=fat, fiber=fiber
    )


def compose_name(selection: Selection) -> str:
    """Render the selection as "Name (Nx), Other (Mx)"."""
    return NAME_SEPARATOR.join(
        f"{item.food.name} ({item.quantity}x)" for item in selection
    )


def meal_record(
    selection: Selection, meal_type: str | None = None
) -> dict[str, object]:
    """Build the combined meal row for a selection, with rounded nutrients."""
    if not selection:
        raise ValidationError("Select at least one food")
    for item in selection:
        if item.quantity < 1:
            raise ValidationError(f"Quantity for {item.food.name} must be at least 1")
    summed = totals(selection)
    return {
        "name": compose_name(selection),
        "calories": int(round_half_up(summed.calories)),
        "protein": int(round_half_up(summed.protein)),
        "carbs": int(round_half_up(summed.carbs)),
        "fat": int(round_half_up(summed.fat)),
        "fiber": int(round_half_up(summed.fiber)),
        "meal_type": meal_type,
    }


def meal_records_per_item(
    selection: Selection, meal_type: str | None = None
) -> list[dict[str, object]]:
    """Build one meal row per selected food."""
    if not selection:
        raise ValidationError("Select at least one food")
    return [meal_record((item,), meal_type) for item in selection]


def custom_food(name: str, nutrients: NutrientTotals) -> Food:
    """Synthetic catalog entry carrying stored totals verbatim."""
    return Food(
        id=CUSTOM_FOOD_ID,
        name=name or "Custom meal",
        category=CUSTOM_CATEGORY,
        standard_quantity="1 serving",
        calories=nutrients.calories,
        protein=nutrients.protein,
        carbs=nutrients.carbs,
        fat=nutrients.fat,
        fiber=nutrients.fiber,
    )


def parse_selection(
    name: str, catalog: Catalog[Food], stored: NutrientTotals
) -> ParsedSelection:
    """Read a stored meal name back into catalog items for editing.

    Every ", "-separated segment must name a catalog food exactly, with an
    optional " (Nx)" suffix. If any segment does not resolve, the whole meal
    becomes a single custom item holding the stored totals so it can still be
    edited and resubmitted. A trailing " (1x)" is dropped from the custom
    item's name so resubmitting does not append another one.
    """
    items: list[SelectedItem] = []
    for segment in name.split(NAME_SEPARATOR) if name else []:
        parsed = _parse_segment(segment, catalog)
        if parsed is None:
            items = []
            break
        items.append(parsed)

    if items:
        merged: Selection = ()
        for item in items:
            existing = next(
                (current for current in merged if current.food.id == item.food.id),
                None,
            )
            if existing is None:
                merged = (*merged, item)
            else:
                merged = set_quantity(
                    merged, item.food.id, existing.quantity + item.quantity
                )
        return ParsedSelection(items=merged, used_fallback=False)

    logger.warning("Meal name did not match the catalog, using custom item: %r", name)
    return ParsedSelection(
        items=(
            SelectedItem(
                food=custom_food(_SINGLE_SUFFIX.sub("", name), stored), quantity=1
            ),
        ),
        used_fallback=True,
    )


def estimate_workout_calories(workout: WorkoutType, duration_minutes: int) -> int:
    """Estimated burn for a workout of the given length."""
    return int(round_half_up(workout.calories_per_minute * duration_minutes))


def _parse_segment(segment: str, catalog: Catalog[Food]) -> SelectedItem | None:
    match = _SEGMENT_PATTERN.match(segment)
    if match:
        food_name = match.group("name")
        quantity = int(match.group("quantity"))
    else:
        food_name = segment
        quantity = 1
    food = catalog.find_by_name(food_name)
    if food is None or quantity < 1:
        return None
    return SelectedItem(food=food, quantity=quantity)

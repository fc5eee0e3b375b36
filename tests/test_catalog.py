"""Tests for the food and workout catalogs."""

from wellness_tracker.data.foods import FOOD_CATALOG
from wellness_tracker.data.workouts import WORKOUT_CATALOG
from wellness_tracker.domain.catalog import ALL_CATEGORIES


def test_food_lookup_by_id_and_name() -> None:
    idli = FOOD_CATALOG.get("25")

    assert idli is not None
    assert idli.name == "Idli"
    assert FOOD_CATALOG.find_by_name("Idli") == idli
    assert FOOD_CATALOG.get("missing") is None


def test_categories_start_with_all_and_are_unique() -> None:
    categories = FOOD_CATALOG.categories()

    assert categories[0] == ALL_CATEGORIES
    assert len(categories) == len(set(categories))
    assert "Snacks" in categories


def test_search_is_case_insensitive_and_filters_category() -> None:
    results = FOOD_CATALOG.search("rice")
    names = {food.name for food in results}

    assert "Jeera Rice" in names
    assert "Basmati Rice (Steamed)" in names

    snacks = FOOD_CATALOG.search("", "Snacks")
    assert snacks
    assert all(food.category == "Snacks" for food in snacks)


def test_workout_catalog_has_unique_ids() -> None:
    ids = [workout.id for workout in WORKOUT_CATALOG]

    assert len(ids) == len(set(ids)) == len(WORKOUT_CATALOG)
    assert WORKOUT_CATALOG.find_by_name("Yoga (Hatha)").calories_per_minute == 3

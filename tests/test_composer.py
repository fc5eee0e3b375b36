"""Tests for composing meals from catalog selections."""

import logging

import pytest

from wellness_tracker.data.foods import FOOD_CATALOG
from wellness_tracker.data.workouts import WORKOUT_CATALOG
from wellness_tracker.domain.stats import NutrientTotals
from wellness_tracker.errors import ValidationError
from wellness_tracker.services.composer import (
    CUSTOM_FOOD_ID,
    SelectedItem,
    add_item,
    compose_name,
    estimate_workout_calories,
    meal_record,
    meal_records_per_item,
    parse_selection,
    remove_item,
    set_quantity,
    totals,
)

IDLI = FOOD_CATALOG.find_by_name("Idli")
DOSA = FOOD_CATALOG.find_by_name("Dosa (Plain)")
STORED = NutrientTotals(calories=420, protein=11, carbs=60, fat=9, fiber=4)


def test_idli_twice() -> None:
    selection = add_item(add_item((), IDLI), IDLI)

    summed = totals(selection)

    assert selection == (SelectedItem(food=IDLI, quantity=2),)
    assert summed.calories == 240
    assert summed.protein == 8
    assert compose_name(selection) == "Idli (2x)"


def test_add_appends_new_items_in_order() -> None:
    selection = add_item(add_item((), DOSA), IDLI)

    assert compose_name(selection) == "Dosa (Plain) (1x), Idli (1x)"


def test_set_quantity_zero_removes_item() -> None:
    selection = add_item((), IDLI)

    assert set_quantity(selection, IDLI.id, 0) == ()
    assert set_quantity(selection, IDLI.id, -3) == ()
    assert set_quantity(selection, IDLI.id, 4)[0].quantity == 4


def test_remove_item_leaves_others() -> None:
    selection = add_item(add_item((), IDLI), DOSA)

    assert remove_item(selection, IDLI.id) == (SelectedItem(food=DOSA, quantity=1),)


def test_totals_scale_linearly_with_quantity() -> None:
    single = totals((SelectedItem(food=DOSA, quantity=1),))
    triple = totals((SelectedItem(food=DOSA, quantity=3),))

    assert triple.calories == single.calories * 3
    assert triple.carbs == single.carbs * 3


def test_meal_record_rounds_nutrients() -> None:
    rice = FOOD_CATALOG.find_by_name("Basmati Rice (Steamed)")

    record = meal_record((SelectedItem(food=rice, quantity=2),), "lunch")

    assert record["name"] == "Basmati Rice (Steamed) (2x)"
    assert record["calories"] == 410
    assert record["protein"] == 9
    assert record["fat"] == 1
    assert record["meal_type"] == "lunch"


def test_meal_record_rejects_empty_selection() -> None:
    with pytest.raises(ValidationError):
        meal_record(())


def test_meal_records_per_item() -> None:
    selection = add_item(add_item(add_item((), IDLI), IDLI), DOSA)

    records = meal_records_per_item(selection)

    assert [record["name"] for record in records] == ["Idli (2x)", "Dosa (Plain) (1x)"]


def test_parse_selection_matches_catalog_names() -> None:
    parsed = parse_selection("Dosa (Plain) (2x), Idli (1x)", FOOD_CATALOG, STORED)

    assert not parsed.used_fallback
    assert parsed.items == (
        SelectedItem(food=DOSA, quantity=2),
        SelectedItem(food=IDLI, quantity=1),
    )


def test_parse_selection_accepts_missing_suffix_and_merges_duplicates() -> None:
    parsed = parse_selection("Idli, Idli (2x)", FOOD_CATALOG, STORED)

    assert parsed.items == (SelectedItem(food=IDLI, quantity=3),)


def test_parse_selection_falls_back_to_custom_item(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("wellness_tracker"), "propagate", True)
    with caplog.at_level(logging.WARNING):
        parsed = parse_selection("Idli (2x), Grandma's curry", FOOD_CATALOG, STORED)

    assert parsed.used_fallback
    (item,) = parsed.items
    assert item.quantity == 1
    assert item.food.id == CUSTOM_FOOD_ID
    assert item.food.name == "Idli (2x), Grandma's curry"
    assert item.food.calories == 420
    assert item.food.fiber == 4
    assert "custom item" in caplog.text


def test_composed_name_parses_back_to_same_selection() -> None:
    selection = add_item(add_item(add_item((), DOSA), IDLI), DOSA)

    parsed = parse_selection(compose_name(selection), FOOD_CATALOG, STORED)

    assert parsed.items == selection


def test_estimate_workout_calories() -> None:
    running = WORKOUT_CATALOG.find_by_name("Running (Moderate)")

    assert estimate_workout_calories(running, 30) == 300


def test_resubmitting_custom_meal_keeps_its_name() -> None:
    name = compose_name(parse_selection("Grandma's curry", FOOD_CATALOG, STORED).items)

    names = []
    for _ in range(3):
        name = compose_name(parse_selection(name, FOOD_CATALOG, STORED).items)
        names.append(name)

    assert names == ["Grandma's curry (1x)"] * 3


def test_custom_item_name_drops_repeated_single_suffixes() -> None:
    parsed = parse_selection("Grandma's curry (1x) (1x)", FOOD_CATALOG, STORED)

    assert parsed.items[0].food.name == "Grandma's curry"

"""Tests for complement resolution rules."""

from leftover_chef.domain.recipes import MealType
from leftover_chef.services.classifier import classify
from leftover_chef.services.complements import (
    DEFAULT_PROTEIN,
    DEFAULT_STARCH,
    FRESH_HERBS,
    resolve,
)


def test_vegan_dinner_never_adds_animal_protein() -> None:
    result = resolve(classify(["rice"]), MealType.DINNER, ["vegan"])

    assert "eggs" not in result
    assert "cheese" not in result
    assert DEFAULT_PROTEIN not in result


def test_base_pantry_always_first() -> None:
    result = resolve(classify(["chicken", "basil", "tomatoes"]), "breakfast", [])

    assert result == ["olive oil", "salt", "pepper"]


def test_vegetarian_adds_eggs_and_cheese() -> None:
    result = resolve(classify(["spinach"]), MealType.BREAKFAST, ["Vegetarian"])

    assert "eggs" in result
    assert "cheese" in result
    assert DEFAULT_PROTEIN not in result


def test_missing_vegetable_adds_aromatics() -> None:
    result = resolve(classify(["chicken"]), MealType.SNACK, [])

    assert "onions" in result
    assert "garlic" in result


def test_starch_only_for_lunch_and_dinner() -> None:
    lunch = resolve(classify(["chicken"]), MealType.LUNCH, [])
    snack = resolve(classify(["chicken"]), MealType.SNACK, [])
    with_grain = resolve(classify(["chicken", "pasta"]), MealType.DINNER, [])

    assert DEFAULT_STARCH in lunch
    assert DEFAULT_STARCH not in snack
    assert DEFAULT_STARCH not in with_grain


def test_missing_herb_adds_placeholder_once() -> None:
    result = resolve(classify(["chicken"]), MealType.DINNER, [])

    assert result.count(FRESH_HERBS) == 1
    assert len(result) == len(set(result))

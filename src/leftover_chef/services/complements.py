"""Complementary staples that round out a dish."""

from collections.abc import Iterable

from leftover_chef.domain.ingredients import Category
from leftover_chef.domain.recipes import MealType
from leftover_chef.services.classifier import ClassifiedIngredients

BASE_PANTRY = ("olive oil", "salt", "pepper")
VEGETARIAN_PROTEINS = ("eggs", "cheese")
DEFAULT_PROTEIN = "chicken breast"
AROMATICS = ("onions", "garlic")
DEFAULT_STARCH = "rice"
FRESH_HERBS = "fresh herbs (basil, parsley, or cilantro)"

_STARCH_MEALS = {MealType.LUNCH, MealType.DINNER}


def resolve(
    classified: ClassifiedIngredients,
    meal_type: MealType | str,
    dietary_preferences: Iterable[str] = (),
) -> list[str]:
    """Return the staples to add for a coherent dish, without duplicates."""
    preferences = {pref.strip().lower() for pref in dietary_preferences}
    additions: list[str] = list(BASE_PANTRY)

    if not classified.get(Category.PROTEIN) and "vegan" not in preferences:
        if "vegetarian" in preferences:
            additions.extend(VEGETARIAN_PROTEINS)
        else:
            additions.append(DEFAULT_PROTEIN)

    if not classified.get(Category.VEGETABLE):
        additions.extend(AROMATICS)

    if meal_type in _STARCH_MEALS and not classified.get(Category.GRAIN):
        additions.append(DEFAULT_STARCH)

    if not classified.get(Category.HERB):
        additions.append(FRESH_HERBS)

    return list(dict.fromkeys(additions))

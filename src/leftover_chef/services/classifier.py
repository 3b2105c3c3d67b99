"""Ingredient classification against the static taxonomy."""

from collections.abc import Iterable, Sequence

from leftover_chef.domain.ingredients import (
    CATEGORY_RULES,
    Category,
    CategoryRule,
    normalize_ingredient,
)

ClassifiedIngredients = dict[Category, list[str]]


def classify(
    ingredients: Iterable[str],
    rules: Sequence[CategoryRule] = CATEGORY_RULES,
) -> ClassifiedIngredients:
    """Group ingredients by every category whose keywords they overlap with.

    Matching is a bidirectional substring test, so "chicken breast" matches
    the "chicken" keyword and "pepper" matches "bell peppers". An ingredient
    can appear in several buckets; one that matches nothing is filed under
    ``Category.UNKNOWN``. Every category key is present in the result.
    """
    classified: ClassifiedIngredients = {category: [] for category in Category}
    for raw in ingredients:
        token = normalize_ingredient(raw)
        if not token:
            continue
        matched = False
        for rule in rules:
            if _matches(token, rule.items):
                classified[rule.category].append(raw.strip())
                matched = True
        if not matched:
            classified[Category.UNKNOWN].append(raw.strip())
    return classified


def _matches(token: str, items: Iterable[str]) -> bool:
    return any(item in token or token in item for item in items)

"""Ingredient taxonomy used for classification."""

from dataclasses import dataclass
from enum import StrEnum


class Category(StrEnum):
    """Closed set of ingredient categories."""

    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    GRAIN = "grain"
    DAIRY = "dairy"
    HERB = "herb"
    SPICE = "spice"
    PANTRY = "pantry"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CategoryRule:
    """Keyword list for a category plus the categories it usually pairs with."""

    category: Category
    items: tuple[str, ...]
    pairings: tuple[Category, ...] = ()


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        category=Category.PROTEIN,
        items=(
            "chicken",
            "beef",
            "pork",
            "fish",
            "salmon",
            "tuna",
            "eggs",
            "tofu",
            "beans",
            "lentils",
            "chickpeas",
        ),
        pairings=(Category.VEGETABLE, Category.GRAIN, Category.HERB, Category.SPICE),
    ),
    CategoryRule(
        category=Category.VEGETABLE,
        items=(
            "tomatoes",
            "onions",
            "garlic",
            "carrots",
            "potatoes",
            "bell peppers",
            "spinach",
            "broccoli",
            "mushrooms",
            "zucchini",
            "cucumber",
            "lettuce",
            "celery",
            "corn",
        ),
        pairings=(Category.PROTEIN, Category.GRAIN, Category.HERB, Category.DAIRY),
    ),
    CategoryRule(
        category=Category.GRAIN,
        items=(
            "rice",
            "pasta",
            "bread",
            "quinoa",
            "oats",
            "flour",
            "noodles",
            "couscous",
        ),
        pairings=(Category.PROTEIN, Category.VEGETABLE, Category.DAIRY),
    ),
    CategoryRule(
        category=Category.DAIRY,
        items=(
            "milk",
            "cheese",
            "yogurt",
            "cream",
            "butter",
            "mozzarella",
            "parmesan",
            "feta",
        ),
        pairings=(Category.VEGETABLE, Category.GRAIN, Category.PROTEIN),
    ),
    CategoryRule(
        category=Category.HERB,
        items=(
            "basil",
            "oregano",
            "thyme",
            "rosemary",
            "parsley",
            "cilantro",
            "mint",
            "dill",
        ),
        pairings=(Category.PROTEIN, Category.VEGETABLE, Category.GRAIN),
    ),
    CategoryRule(
        category=Category.SPICE,
        items=(
            "salt",
            "pepper",
            "paprika",
            "cumin",
            "garlic powder",
            "onion powder",
            "chili powder",
            "turmeric",
        ),
        pairings=(Category.PROTEIN, Category.VEGETABLE),
    ),
    CategoryRule(
        category=Category.PANTRY,
        items=(
            "olive oil",
            "vegetable oil",
            "vinegar",
            "lemon",
            "lime",
            "soy sauce",
            "honey",
            "sugar",
            "baking powder",
        ),
        pairings=(Category.PROTEIN, Category.VEGETABLE, Category.GRAIN),
    ),
)


def normalize_ingredient(raw: str) -> str:
    """Return the comparison form of an ingredient token."""
    return raw.strip().lower()

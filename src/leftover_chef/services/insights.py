"""Rule-based insights and alternative suggestions for generated recipes."""

from collections.abc import Sequence

from leftover_chef.domain.generation import GenerationPreferences
from leftover_chef.domain.ingredients import Category
from leftover_chef.domain.recipes import AiInsights, Alternative, RecipeDraft
from leftover_chef.services.classifier import ClassifiedIngredients

VARIETY_THRESHOLD = 5
VEGETABLE_VARIETY_THRESHOLD = 3
QUICK_MEAL_MINUTES = 15

SPICIER = Alternative(
    title="Spicier Version",
    description="Add heat with chili peppers or hot sauce",
    modifications=[
        "Add 1-2 chili peppers",
        "Include red pepper flakes",
        "Drizzle with hot sauce",
    ],
)
HEALTHIER = Alternative(
    title="Healthier Version",
    description="Boost nutrition and reduce calories",
    modifications=[
        "Add extra vegetables",
        "Use less oil",
        "Include leafy greens",
        "Use whole grain options",
    ],
)
VEGETARIAN = Alternative(
    title="Vegetarian Version",
    description="Replace meat with plant-based proteins",
    modifications=[
        "Use tofu or tempeh instead of meat",
        "Add beans or lentils",
        "Include nuts for protein",
    ],
)

_MEAT_FREE_TAGS = {"vegetarian", "vegan"}


def build_insights(
    ingredients: Sequence[str],
    classified: ClassifiedIngredients,
    preferences: GenerationPreferences,
) -> AiInsights:
    """Return observations about the ingredient set and preferences."""
    tips: list[str] = []
    health_benefits: list[str] = []

    if len(ingredients) >= VARIETY_THRESHOLD:
        tips.append("Excellent! You have a great variety of ingredients to work with.")
    proteins = classified.get(Category.PROTEIN, [])
    if proteins:
        health_benefits.append(
            f"Your {', '.join(proteins)} will provide excellent protein for this meal."
        )
    if len(classified.get(Category.VEGETABLE, [])) >= VEGETABLE_VARIETY_THRESHOLD:
        health_benefits.append(
            "Great vegetable variety! This will make your dish colorful and nutritious."
        )
    if preferences.has_preference("vegetarian"):
        health_benefits.append(
            "This vegetarian recipe maximizes the flavors of your plant-based "
            "ingredients."
        )
    if preferences.cooking_time == QUICK_MEAL_MINUTES:
        tips.append("Perfect for a quick meal! This is designed to be ready in no time.")
    tips.append("Great job reducing food waste by using your leftover ingredients!")

    return AiInsights(tips=tips, health_benefits=health_benefits)


def build_alternatives(
    recipe: RecipeDraft, preferences: GenerationPreferences
) -> list[Alternative]:
    """Return the standard modification templates for a recipe."""
    alternatives = [SPICIER, HEALTHIER]
    already_meat_free = any(
        preferences.has_preference(name) for name in _MEAT_FREE_TAGS
    ) or bool(_MEAT_FREE_TAGS.intersection(tag.lower() for tag in recipe.tags))
    if not already_meat_free:
        alternatives.append(VEGETARIAN)
    return alternatives

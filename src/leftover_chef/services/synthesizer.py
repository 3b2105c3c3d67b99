"""Local, template-based recipe synthesis."""

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from leftover_chef.domain.generation import GenerationPreferences
from leftover_chef.domain.ingredients import Category
from leftover_chef.domain.recipes import (
    LEFTOVER_TAG,
    InstructionStep,
    MealType,
    Nutrition,
    RecipeDraft,
    RecipeIngredient,
    Timing,
)
from leftover_chef.services.classifier import ClassifiedIngredients
from leftover_chef.services.templates import RecipeTemplate, render, templates_for

PREP_TIME_MINUTES = 10
DEFAULT_TEMPLATE = "stir_fry"

# Inclusive bounds of the synthetic per-serving nutrition estimate.
NUTRITION_RANGES: dict[str, tuple[int, int]] = {
    "calories": (300, 600),
    "protein": (15, 40),
    "carbs": (20, 60),
    "fat": (10, 30),
    "fiber": (3, 11),
}

_TITLE_CATEGORIES = (Category.PROTEIN, Category.VEGETABLE, Category.GRAIN)


def select_template(
    classified: ClassifiedIngredients, meal_type: MealType | str
) -> RecipeTemplate:
    """Pick the template for the meal type based on which categories are filled."""
    has_protein = bool(classified.get(Category.PROTEIN))
    has_vegetable = bool(classified.get(Category.VEGETABLE))
    has_grain = bool(classified.get(Category.GRAIN))

    key = DEFAULT_TEMPLATE
    if has_protein and has_vegetable:
        key = "roasted_dish" if meal_type == MealType.DINNER else "stir_fry"
    elif has_grain:
        key = "pasta_dish"
    elif has_vegetable:
        key = "salad_bowl" if meal_type == MealType.LUNCH else "soup"

    available = templates_for(meal_type)
    if key not in available:
        key = next(iter(available))
    return available[key]


def build_title(
    classified: ClassifiedIngredients,
    template: RecipeTemplate,
    meal_type: MealType | str,
) -> str:
    leading: list[str] = []
    for category in _TITLE_CATEGORIES:
        for ingredient in classified.get(category, []):
            if ingredient not in leading:
                leading.append(ingredient)
    main = " and ".join(leading[:2])
    if not main:
        return f"Delicious {str(meal_type).capitalize()}"
    return f"{main[0].upper()}{main[1:]} {template.display_name}"


def build_description(ingredients: Sequence[str], meal_type: MealType | str) -> str:
    listed = ", ".join(ingredients[:3])
    suffix = " and more" if len(ingredients) > 3 else ""
    return f"A delicious {meal_type} made with your leftover {listed}{suffix}"


@dataclass
class TemplateSynthesizer:
    """Render a template into a full recipe draft."""

    rng: random.Random = field(default_factory=random.Random)

    def synthesize(
        self,
        user_ingredients: Sequence[str],
        classified: ClassifiedIngredients,
        complements: Sequence[str],
        preferences: GenerationPreferences,
    ) -> RecipeDraft:
        """Build a recipe from the user's ingredients and resolved complements."""
        meal_type = preferences.meal_type
        template = select_template(classified, meal_type)
        leftovers = [item.strip() for item in user_ingredients if item.strip()]
        leftover_keys = {item.lower() for item in leftovers}
        added = [item for item in complements if item.lower() not in leftover_keys]
        combined = [*leftovers, *added]

        ingredients = [
            RecipeIngredient(name=name, amount="1", unit="portion", is_leftover=True)
            for name in leftovers
        ]
        ingredients.extend(
            RecipeIngredient(name=name, amount="to taste", is_leftover=False)
            for name in added
        )
        instructions = [
            InstructionStep(step=index, instruction=render(line, combined))
            for index, line in enumerate(template.instructions, start=1)
        ]
        tags = [
            str(meal_type),
            template.difficulty.lower(),
            LEFTOVER_TAG,
            *(pref.strip().lower() for pref in preferences.dietary_preferences),
        ]
        return RecipeDraft(
            title=build_title(classified, template, meal_type),
            description=build_description(leftovers, meal_type),
            servings=preferences.serving_size,
            difficulty=template.difficulty,
            total_time=PREP_TIME_MINUTES + template.cook_time,
            timing=Timing(prep=PREP_TIME_MINUTES, cook=template.cook_time),
            ingredients=ingredients,
            instructions=instructions,
            nutrition=self._estimate_nutrition(),
            tags=tags,
            meal_type=meal_type,
        )

    def _estimate_nutrition(self) -> Nutrition:
        """Return a synthetic estimate inside ``NUTRITION_RANGES``."""
        values = {
            name: self.rng.randint(low, high)
            for name, (low, high) in NUTRITION_RANGES.items()
        }
        return Nutrition(**values)

"""Tests for template selection, rendering and local synthesis."""

import random

from leftover_chef.domain.generation import GenerationPreferences
from leftover_chef.domain.recipes import Difficulty, MealType
from leftover_chef.services.classifier import classify
from leftover_chef.services.complements import resolve
from leftover_chef.services.synthesizer import (
    NUTRITION_RANGES,
    TemplateSynthesizer,
    build_title,
    select_template,
)
from leftover_chef.services.templates import TEMPLATES, render, slots


def _synthesize(ingredients: list[str], **prefs: object):
    preferences = GenerationPreferences(**prefs)
    classified = classify(ingredients)
    complements = resolve(
        classified, preferences.meal_type, preferences.dietary_preferences
    )
    synthesizer = TemplateSynthesizer(rng=random.Random(42))
    return synthesizer.synthesize(ingredients, classified, complements, preferences)


def test_protein_and_vegetable_dinner_roasts() -> None:
    template = select_template(classify(["chicken", "carrots"]), MealType.DINNER)

    assert template.key == "roasted_dish"


def test_protein_and_vegetable_lunch_stir_fries() -> None:
    template = select_template(classify(["tofu", "broccoli"]), MealType.LUNCH)

    assert template.key == "stir_fry"


def test_grain_without_protein_prefers_pasta() -> None:
    template = select_template(classify(["pasta"]), MealType.LUNCH)

    assert template.key == "pasta_dish"


def test_vegetable_only_depends_on_meal_type() -> None:
    assert select_template(classify(["lettuce"]), MealType.LUNCH).key == "salad_bowl"
    assert select_template(classify(["lettuce"]), MealType.DINNER).key == "soup"


def test_missing_template_falls_back_to_first_for_meal() -> None:
    template = select_template(classify(["chicken", "carrots"]), MealType.BREAKFAST)

    assert template.key == next(iter(TEMPLATES[MealType.BREAKFAST]))


def test_render_uses_first_matching_ingredient() -> None:
    line = "Heat {olive oil} then add {protein} and {garlic}"

    rendered = render(line, ["garlic cloves", "extra virgin olive oil", "garlic"])

    assert rendered == "Heat extra virgin olive oil then add protein and garlic cloves"


def test_slots_are_listed_in_order() -> None:
    assert slots("Add {soy sauce} and {rice}") == ["soy sauce", "rice"]


def test_title_joins_two_leading_ingredients() -> None:
    classified = classify(["rice", "chicken", "carrots"])
    template = select_template(classified, MealType.DINNER)

    title = build_title(classified, template, MealType.DINNER)

    assert title == "Chicken and carrots Roasted Dish"


def test_title_falls_back_to_meal_type() -> None:
    classified = classify(["honey"])
    template = select_template(classified, MealType.SNACK)

    assert build_title(classified, template, MealType.SNACK) == "Delicious Snack"


def test_synthesized_recipe_marks_leftovers() -> None:
    draft = _synthesize(["chicken", "carrots"], meal_type="dinner", serving_size=2)

    leftovers = [item.name for item in draft.ingredients if item.is_leftover]
    added = [item.name for item in draft.ingredients if not item.is_leftover]
    assert leftovers == ["chicken", "carrots"]
    assert "olive oil" in added
    assert draft.servings == 2
    assert draft.difficulty == Difficulty.MEDIUM
    assert draft.timing is not None
    assert draft.timing.prep + draft.timing.cook == draft.total_time
    assert [step.step for step in draft.instructions] == list(
        range(1, len(draft.instructions) + 1)
    )
    assert "leftover-friendly" in draft.tags
    assert "dinner" in draft.tags


def test_synthesized_instructions_fill_slots() -> None:
    draft = _synthesize(["chicken", "carrots"], meal_type="dinner")

    assert "Toss with olive oil" in draft.instructions[2].instruction
    unresolved = draft.instructions[3].instruction
    assert unresolved.startswith("Place protein and vegetables")


def test_nutrition_within_documented_ranges() -> None:
    for seed in range(20):
        synthesizer = TemplateSynthesizer(rng=random.Random(seed))
        nutrition = synthesizer._estimate_nutrition()
        for name, (low, high) in NUTRITION_RANGES.items():
            assert low <= getattr(nutrition, name) <= high

"""Recipe templates and the slot renderer used by local synthesis."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from leftover_chef.domain.ingredients import normalize_ingredient
from leftover_chef.domain.recipes import Difficulty, MealType

SLOT_PATTERN = re.compile(r"\{([^{}]+)\}")


@dataclass(frozen=True)
class RecipeTemplate:
    """Parameterized recipe skeleton."""

    key: str
    base_ingredients: tuple[str, ...]
    additional_ingredients: tuple[str, ...]
    optional_ingredients: tuple[str, ...]
    instructions: tuple[str, ...]
    cook_time: int
    difficulty: Difficulty

    @property
    def display_name(self) -> str:
        return self.key.replace("_", " ").title()


TEMPLATES: dict[MealType, dict[str, RecipeTemplate]] = {
    MealType.BREAKFAST: {
        "scrambled_eggs": RecipeTemplate(
            key="scrambled_eggs",
            base_ingredients=("eggs",),
            additional_ingredients=("butter", "milk", "salt", "pepper"),
            optional_ingredients=("cheese", "herbs", "vegetables"),
            instructions=(
                "Crack {eggs} into a bowl and whisk with {milk}, salt, and pepper",
                "Heat {butter} in a non-stick pan over medium-low heat",
                "Pour in eggs and let sit for 20 seconds, then gently stir",
                "Continue cooking, stirring gently until eggs are creamy",
                "Add {cheese} and {vegetables} if using",
                "Serve immediately with toast",
            ),
            cook_time=10,
            difficulty=Difficulty.EASY,
        ),
        "pancakes": RecipeTemplate(
            key="pancakes",
            base_ingredients=("flour", "eggs", "milk"),
            additional_ingredients=("baking powder", "sugar", "salt", "butter"),
            optional_ingredients=("vanilla", "berries", "honey"),
            instructions=(
                "Mix {flour}, baking powder, sugar, and salt in a large bowl",
                "In another bowl, whisk {eggs}, {milk}, and melted {butter}",
                "Combine wet and dry ingredients until just mixed",
                "Heat a griddle over medium heat",
                "Pour batter and cook until bubbles form, then flip",
                "Serve with {honey} and {berries}",
            ),
            cook_time=20,
            difficulty=Difficulty.EASY,
        ),
    },
    MealType.LUNCH: {
        "stir_fry": RecipeTemplate(
            key="stir_fry",
            base_ingredients=("vegetables", "protein"),
            additional_ingredients=("oil", "soy sauce", "garlic", "ginger"),
            optional_ingredients=("rice", "noodles", "sesame oil", "green onions"),
            instructions=(
                "Heat {oil} in a large wok or skillet over high heat",
                "Add {garlic} and ginger, stir-fry for 30 seconds",
                "Add {protein} and cook until almost done",
                "Add {vegetables} and stir-fry until tender-crisp",
                "Add {soy sauce} and toss to combine",
                "Serve over {rice} or {noodles}",
            ),
            cook_time=15,
            difficulty=Difficulty.EASY,
        ),
        "salad_bowl": RecipeTemplate(
            key="salad_bowl",
            base_ingredients=("lettuce", "vegetables"),
            additional_ingredients=("olive oil", "vinegar", "salt", "pepper"),
            optional_ingredients=("protein", "cheese", "nuts", "seeds"),
            instructions=(
                "Wash and chop {lettuce} and {vegetables}",
                "Arrange in a large bowl",
                "Add {protein} and {cheese} if using",
                "Whisk together {olive oil}, {vinegar}, salt, and pepper",
                "Drizzle dressing over salad",
                "Toss gently and serve immediately",
            ),
            cook_time=10,
            difficulty=Difficulty.EASY,
        ),
        "pasta_dish": RecipeTemplate(
            key="pasta_dish",
            base_ingredients=("pasta",),
            additional_ingredients=("olive oil", "garlic", "salt", "pepper"),
            optional_ingredients=("vegetables", "protein", "cheese", "herbs"),
            instructions=(
                "Cook {pasta} according to package directions",
                "Heat {olive oil} in a large pan",
                "Add {garlic} and cook for 1 minute",
                "Add {vegetables} and {protein}, cook until tender",
                "Add drained pasta and toss",
                "Season with salt, pepper, and {herbs}",
                "Top with {cheese} and serve",
            ),
            cook_time=20,
            difficulty=Difficulty.MEDIUM,
        ),
    },
    MealType.DINNER: {
        "roasted_dish": RecipeTemplate(
            key="roasted_dish",
            base_ingredients=("protein", "vegetables"),
            additional_ingredients=("olive oil", "salt", "pepper", "herbs"),
            optional_ingredients=("potatoes", "onions", "garlic"),
            instructions=(
                "Preheat oven to 400°F (200°C)",
                "Cut {vegetables} and {potatoes} into chunks",
                "Toss with {olive oil}, salt, pepper, and {herbs}",
                "Place {protein} and vegetables on a baking sheet",
                "Roast for 25-35 minutes until cooked through",
                "Let rest for 5 minutes before serving",
            ),
            cook_time=40,
            difficulty=Difficulty.MEDIUM,
        ),
        "soup": RecipeTemplate(
            key="soup",
            base_ingredients=("vegetables", "broth"),
            additional_ingredients=("onions", "garlic", "oil", "salt", "pepper"),
            optional_ingredients=("protein", "beans", "herbs", "cream"),
            instructions=(
                "Heat {oil} in a large pot",
                "Sauté {onions} and {garlic} until fragrant",
                "Add {vegetables} and cook for 5 minutes",
                "Add {broth} and bring to a boil",
                "Simmer for 20 minutes until vegetables are tender",
                "Add {protein} and {beans} if using",
                "Season with salt, pepper, and {herbs}",
            ),
            cook_time=30,
            difficulty=Difficulty.EASY,
        ),
    },
    MealType.SNACK: {
        "quick_bite": RecipeTemplate(
            key="quick_bite",
            base_ingredients=("bread", "cheese"),
            additional_ingredients=("butter",),
            optional_ingredients=("tomatoes", "herbs", "vegetables"),
            instructions=(
                "Toast {bread} until golden",
                "Spread with {butter}",
                "Top with {cheese} and {vegetables}",
                "Add {herbs} for extra flavor",
                "Serve immediately",
            ),
            cook_time=5,
            difficulty=Difficulty.EASY,
        ),
    },
    MealType.DESSERT: {
        "fruit_bowl": RecipeTemplate(
            key="fruit_bowl",
            base_ingredients=("fruits",),
            additional_ingredients=("honey", "yogurt"),
            optional_ingredients=("nuts", "granola", "mint"),
            instructions=(
                "Wash and cut {fruits} into bite-sized pieces",
                "Arrange in a bowl",
                "Drizzle with {honey}",
                "Top with {yogurt} and {nuts}",
                "Garnish with {mint} if desired",
            ),
            cook_time=5,
            difficulty=Difficulty.EASY,
        ),
    },
}


def templates_for(meal_type: MealType | str) -> dict[str, RecipeTemplate]:
    """Return the templates for a meal type, using lunch for unknown types."""
    return TEMPLATES.get(meal_type, TEMPLATES[MealType.LUNCH])


def slots(line: str) -> list[str]:
    """Return slot keywords in the order they appear in a line."""
    return SLOT_PATTERN.findall(line)


def render(line: str, ingredients: Sequence[str]) -> str:
    """Fill each slot with the first ingredient containing its keyword.

    Unresolved slots are replaced by their bare keyword.
    """

    def _substitute(match: re.Match[str]) -> str:
        keyword = match.group(1)
        wanted = normalize_ingredient(keyword)
        for ingredient in ingredients:
            if wanted in normalize_ingredient(ingredient):
                return ingredient
        return keyword

    return SLOT_PATTERN.sub(_substitute, line)

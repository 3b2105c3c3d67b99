"""Prompt templates for remote recipe generation."""

from collections.abc import Sequence

from leftover_chef.domain.generation import GenerationPreferences

RECIPE_SYSTEM_PROMPT = """You are a creative home cook who turns leftovers into complete recipes.

Use the ingredients the user already has and add only common staples when needed.
Mark every ingredient the user supplied with "isLeftover": true and every added staple with "isLeftover": false.

Respond ONLY with valid JSON matching this schema:
{
  "title": "string",
  "description": "string",
  "totalTime": number,
  "servings": number,
  "difficulty": "Easy" | "Medium" | "Hard",
  "ingredients": [{"name": "string", "amount": "string", "unit": "string", "isLeftover": boolean}],
  "instructions": [{"step": number, "instruction": "string", "time": number}],
  "nutrition": {"calories": number, "protein": number, "carbs": number, "fat": number, "fiber": number, "sugar": number},
  "tags": ["string"],
  "aiInsights": {"tips": ["string"], "healthBenefits": ["string"], "variations": ["string"]},
  "alternatives": [{"title": "string", "description": "string", "modifications": ["string"]}]
}

Number steps from 1 without gaps. Include the tag "leftover-friendly"."""


def get_recipe_prompt(
    ingredients: Sequence[str], preferences: GenerationPreferences
) -> str:
    """Generate the user prompt for a recipe request."""
    listed = ", ".join(ingredients)
    dietary = ", ".join(preferences.dietary_preferences) or "none"
    time_limit = (
        f"{preferences.cooking_time} minutes"
        if preferences.cooking_time
        else "no limit"
    )
    return f"""Create a {preferences.meal_type} recipe using these leftover ingredients: {listed}

Dietary preferences: {dietary}
Maximum cooking time: {time_limit}
Serving size: Serves {preferences.serving_size}

Respond with JSON only."""

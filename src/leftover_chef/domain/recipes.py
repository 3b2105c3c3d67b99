"""Canonical recipe models shared by generation and persistence."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

MAX_SERVINGS = 12
LEFTOVER_TAG = "leftover-friendly"


class MealType(StrEnum):
    """Meal types a recipe can be generated for."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    DESSERT = "dessert"


class Difficulty(StrEnum):
    """Recipe difficulty levels."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class RecipeSource(StrEnum):
    """Which generation path produced a recipe."""

    REMOTE = "remote"
    FALLBACK = "fallback"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RecipeIngredient(CamelModel):
    """Ingredient line of a recipe."""

    name: str = Field(min_length=1)
    amount: str = ""
    unit: str = ""
    is_leftover: bool = False

    @field_validator("amount", "unit", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, int | float):
            return f"{value:g}"
        return value


class InstructionStep(CamelModel):
    """Single numbered instruction."""

    step: int = Field(ge=1)
    instruction: str = Field(min_length=1)
    time: int | None = Field(default=None, ge=0)


class Nutrition(CamelModel):
    """Estimated nutrition per serving."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fiber: float = Field(ge=0)
    sugar: float | None = Field(default=None, ge=0)


class Timing(CamelModel):
    """Prep and cook time breakdown in minutes."""

    prep: int = Field(ge=0)
    cook: int = Field(ge=0)


class AiInsights(CamelModel):
    """Optional enrichment notes attached to a recipe."""

    tips: list[str] = Field(default_factory=list)
    health_benefits: list[str] = Field(default_factory=list)
    variations: list[str] = Field(default_factory=list)


class Alternative(CamelModel):
    """A suggested variant of a recipe."""

    title: str
    description: str
    modifications: list[str] = Field(default_factory=list)


class RecipeDraft(CamelModel):
    """Recipe content before it is stamped with identity and provenance."""

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    servings: int = Field(ge=1, le=MAX_SERVINGS)
    difficulty: Difficulty
    total_time: int = Field(ge=0)
    timing: Timing | None = None
    ingredients: list[RecipeIngredient] = Field(min_length=1)
    instructions: list[InstructionStep] = Field(min_length=1)
    nutrition: Nutrition
    tags: list[str] = Field(default_factory=list)
    meal_type: MealType | None = None
    ai_insights: AiInsights | None = None
    alternatives: list[Alternative] | None = None

    @field_validator("difficulty", mode="before")
    @classmethod
    def _normalize_difficulty(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().capitalize()
        return value

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(tag for tag in value if tag))

    @model_validator(mode="after")
    def _check_consistency(self) -> "RecipeDraft":
        steps = [item.step for item in self.instructions]
        if steps != list(range(1, len(steps) + 1)):
            raise ValueError("instruction steps must be contiguous from 1")
        if self.timing and self.timing.prep + self.timing.cook != self.total_time:
            raise ValueError("timing breakdown must add up to totalTime")
        return self


class Recipe(RecipeDraft):
    """Canonical recipe with identity and provenance."""

    id: int
    source: RecipeSource
    created_at: datetime

    @classmethod
    def from_draft(
        cls,
        draft: RecipeDraft,
        *,
        recipe_id: int,
        source: RecipeSource,
        created_at: datetime,
    ) -> "Recipe":
        """Stamp a draft with an id, source and creation time."""
        return cls.model_validate(
            {
                **draft.model_dump(),
                "id": recipe_id,
                "source": source,
                "created_at": created_at,
            }
        )


class HistoryEntry(CamelModel):
    """Recipe recorded in the generation history."""

    recipe: Recipe
    generated_at: datetime
    last_viewed_at: datetime
    view_count: int = Field(default=1, ge=0)


class FavoriteEntry(CamelModel):
    """Recipe saved by the user."""

    recipe: Recipe
    saved_at: datetime
    updated_at: datetime | None = None
    category: str = "uncategorized"
    notes: str = ""

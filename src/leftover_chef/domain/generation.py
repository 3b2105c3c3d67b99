"""Domain models for recipe generation requests and outcomes."""

from dataclasses import dataclass

from pydantic import Field

from leftover_chef.domain.recipes import MAX_SERVINGS, CamelModel, MealType, Recipe


class GenerationPreferences(CamelModel):
    """User preferences that shape a generated recipe."""

    meal_type: MealType = MealType.DINNER
    dietary_preferences: list[str] = Field(default_factory=list)
    cooking_time: int | None = Field(default=None, gt=0)
    serving_size: int = Field(default=4, ge=1, le=MAX_SERVINGS)

    def has_preference(self, name: str) -> bool:
        """Return True when a dietary preference is present, ignoring case."""
        wanted = name.lower()
        return any(pref.strip().lower() == wanted for pref in self.dietary_preferences)


@dataclass(frozen=True)
class GenerationResult:
    """Caller-visible result of a generation request."""

    success: bool
    recipe: Recipe | None = None
    error: str | None = None

    @classmethod
    def ok(cls, recipe: Recipe) -> "GenerationResult":
        return cls(success=True, recipe=recipe)

    @classmethod
    def failure(cls, error: str) -> "GenerationResult":
        return cls(success=False, error=error)


@dataclass(frozen=True)
class RemoteOutcome:
    """Recipe produced by the remote generator."""

    recipe: Recipe


@dataclass(frozen=True)
class FallbackOutcome:
    """Recipe produced locally after the remote path was skipped or failed."""

    recipe: Recipe
    reason: str


GenerationOutcome = RemoteOutcome | FallbackOutcome

"""Remote-first recipe generation with a local template fallback."""

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from pydantic import ValidationError as SchemaValidationError

from leftover_chef.domain.errors import (
    MalformedRemoteResponse,
    RemoteUnavailable,
    ValidationError,
)
from leftover_chef.domain.generation import (
    FallbackOutcome,
    GenerationOutcome,
    GenerationPreferences,
    GenerationResult,
    RemoteOutcome,
)
from leftover_chef.domain.recipes import (
    LEFTOVER_TAG,
    Recipe,
    RecipeDraft,
    RecipeSource,
)
from leftover_chef.services.classifier import ClassifiedIngredients, classify
from leftover_chef.services.complements import resolve
from leftover_chef.services.history import HistoryService
from leftover_chef.services.insights import build_alternatives, build_insights
from leftover_chef.services.prompts import RECIPE_SYSTEM_PROMPT, get_recipe_prompt
from leftover_chef.services.synthesizer import TemplateSynthesizer

EMPTY_INGREDIENTS_MESSAGE = "Please add at least one ingredient to generate a recipe"

_logger = logging.getLogger(__name__)


class RecipeClient(Protocol):
    """Interface for a remote recipe generator."""

    async def generate(self, *, system_prompt: str, user_prompt: str) -> object:
        """Return the decoded JSON document produced for the prompts."""


@dataclass
class IdGenerator:
    """Millisecond-clock ids that never repeat within a process."""

    _last: int = 0

    def __call__(self) -> int:
        now_ms = time.time_ns() // 1_000_000
        self._last = max(now_ms, self._last + 1)
        return self._last


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class RecipeGenerationService:
    """Coordinate one remote attempt, the local fallback and history recording."""

    synthesizer: TemplateSynthesizer
    history: HistoryService | None = None
    client: RecipeClient | None = None
    timeout_seconds: float = 30.0
    id_generator: Callable[[], int] = field(default_factory=IdGenerator)
    clock: Callable[[], datetime] = _utcnow

    async def generate(
        self,
        ingredients: Sequence[str],
        preferences: GenerationPreferences | None = None,
    ) -> GenerationResult:
        """Generate a recipe; only invalid input produces a failed result."""
        resolved = preferences or GenerationPreferences()
        try:
            cleaned = _validate_ingredients(ingredients)
        except ValidationError as exc:
            _logger.info("Rejected generation request: %s", exc)
            return GenerationResult.failure(str(exc))

        outcome = await self._produce(cleaned, resolved)
        if isinstance(outcome, FallbackOutcome):
            _logger.warning(
                "Using template fallback for recipe %s: %s",
                outcome.recipe.id,
                outcome.reason,
            )
        else:
            _logger.info("Generated remote recipe %s", outcome.recipe.id)

        recipe = outcome.recipe
        if self.history is not None and not self.history.record(recipe):
            _logger.warning("Failed to record recipe %s in history", recipe.id)
        return GenerationResult.ok(recipe)

    async def _produce(
        self, ingredients: list[str], preferences: GenerationPreferences
    ) -> GenerationOutcome:
        classified = classify(ingredients)
        try:
            draft = await self._generate_remote(ingredients, preferences)
        except (RemoteUnavailable, MalformedRemoteResponse) as exc:
            complements = resolve(
                classified, preferences.meal_type, preferences.dietary_preferences
            )
            draft = self.synthesizer.synthesize(
                ingredients, classified, complements, preferences
            )
            recipe = self._finalize(
                draft, RecipeSource.FALLBACK, ingredients, classified, preferences
            )
            return FallbackOutcome(recipe=recipe, reason=f"{type(exc).__name__}: {exc}")
        recipe = self._finalize(
            draft, RecipeSource.REMOTE, ingredients, classified, preferences
        )
        return RemoteOutcome(recipe=recipe)

    async def _generate_remote(
        self, ingredients: list[str], preferences: GenerationPreferences
    ) -> RecipeDraft:
        if self.client is None:
            raise RemoteUnavailable("no remote generator configured")
        try:
            raw = await asyncio.wait_for(
                self.client.generate(
                    system_prompt=RECIPE_SYSTEM_PROMPT,
                    user_prompt=get_recipe_prompt(ingredients, preferences),
                ),
                timeout=self.timeout_seconds,
            )
        except (RemoteUnavailable, MalformedRemoteResponse):
            raise
        except TimeoutError as exc:
            raise RemoteUnavailable(
                f"no response within {self.timeout_seconds}s"
            ) from exc
        except Exception as exc:
            raise RemoteUnavailable(str(exc) or type(exc).__name__) from exc

        if not isinstance(raw, dict) or not raw:
            raise MalformedRemoteResponse("remote response is not a JSON object")
        try:
            draft = RecipeDraft.model_validate(raw)
        except SchemaValidationError as exc:
            raise MalformedRemoteResponse(
                f"remote response does not match the recipe shape "
                f"({exc.error_count()} errors)"
            ) from exc
        if draft.meal_type is None:
            draft = draft.model_copy(update={"meal_type": preferences.meal_type})
        return draft

    def _finalize(
        self,
        draft: RecipeDraft,
        source: RecipeSource,
        ingredients: list[str],
        classified: ClassifiedIngredients,
        preferences: GenerationPreferences,
    ) -> Recipe:
        updates: dict[str, object] = {}
        if draft.ai_insights is None:
            updates["ai_insights"] = build_insights(
                ingredients, classified, preferences
            )
        if not draft.alternatives:
            updates["alternatives"] = build_alternatives(draft, preferences)
        tags = _with_required_tags(draft, preferences)
        if tags != draft.tags:
            updates["tags"] = tags
        if updates:
            draft = draft.model_copy(update=updates)
        return Recipe.from_draft(
            draft,
            recipe_id=self.id_generator(),
            source=source,
            created_at=self.clock(),
        )


def _validate_ingredients(ingredients: Sequence[str] | None) -> list[str]:
    cleaned = [item.strip() for item in ingredients or [] if item and item.strip()]
    if not cleaned:
        raise ValidationError(EMPTY_INGREDIENTS_MESSAGE)
    return cleaned


def _with_required_tags(
    draft: RecipeDraft, preferences: GenerationPreferences
) -> list[str]:
    """Return the draft's tags plus meal type, difficulty and leftover-friendly."""
    required = [
        str(draft.meal_type or preferences.meal_type),
        draft.difficulty.lower(),
        LEFTOVER_TAG,
    ]
    return [*draft.tags, *(tag for tag in required if tag not in draft.tags)]

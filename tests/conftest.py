"""Shared test fixtures."""

import random
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from leftover_chef.adapters.memory_storage import InMemoryKeyValueStorage
from leftover_chef.config import Settings
from leftover_chef.containers import AppContainer
from leftover_chef.domain.recipes import Recipe, RecipeSource
from leftover_chef.services.favorites import FavoritesService
from leftover_chef.services.generation import RecipeClient, RecipeGenerationService
from leftover_chef.services.history import HistoryService
from leftover_chef.services.preferences import PreferencesService
from leftover_chef.services.stats import StatsService
from leftover_chef.services.synthesizer import TemplateSynthesizer


def remote_recipe_payload() -> dict[str, object]:
    return {
        "title": "Chicken Rice Bowl",
        "description": "A delicious and healthy meal",
        "totalTime": 30,
        "servings": 4,
        "difficulty": "Easy",
        "ingredients": [
            {"name": "chicken", "amount": "1", "unit": "lb", "isLeftover": True},
            {"name": "rice", "amount": 2, "unit": "cups", "isLeftover": True},
        ],
        "instructions": [
            {"step": 1, "instruction": "Cook the rice", "time": 15},
            {"step": 2, "instruction": "Cook the chicken", "time": 15},
        ],
        "nutrition": {
            "calories": 450,
            "protein": 35,
            "carbs": 40,
            "fat": 12,
            "fiber": 3,
            "sugar": 2,
        },
        "tags": ["healthy", "quick"],
        "aiInsights": {
            "tips": ["Season well"],
            "healthBenefits": ["High protein"],
            "variations": ["Add vegetables"],
        },
        "alternatives": [
            {
                "title": "Spicy Version",
                "description": "Add chili peppers",
                "modifications": ["Add 1 tsp chili flakes"],
            }
        ],
    }


def make_recipe(recipe_id: int, **overrides: object) -> Recipe:
    """Build a minimal valid recipe for store tests."""
    payload: dict[str, object] = {
        "id": recipe_id,
        "title": f"Recipe {recipe_id}",
        "description": "A test recipe",
        "servings": 2,
        "difficulty": "Easy",
        "totalTime": 20,
        "ingredients": [{"name": "rice", "amount": "1", "unit": "cup"}],
        "instructions": [{"step": 1, "instruction": "Cook the rice"}],
        "nutrition": {
            "calories": 300,
            "protein": 15,
            "carbs": 30,
            "fat": 10,
            "fiber": 5,
        },
        "tags": ["dinner", "leftover-friendly"],
        "source": RecipeSource.FALLBACK,
        "createdAt": datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
    }
    payload.update(overrides)
    return Recipe.model_validate(payload)


@dataclass
class FakeRecipeClient(RecipeClient):
    """Fake remote generator returning a payload or raising an error."""

    payload: object = field(default_factory=remote_recipe_payload)
    error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def generate(self, *, system_prompt: str, user_prompt: str) -> object:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class UnreachableKeyValueStorage(InMemoryKeyValueStorage):
    """Storage whose reads and deletes fail like a dropped connection."""

    def get(self, key: str) -> bytes | None:
        raise ConnectionError("storage unreachable")

    def delete(self, key: str) -> None:
        raise ConnectionError("storage unreachable")


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", openai_api_key=None)


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def history_service(storage: InMemoryKeyValueStorage) -> HistoryService:
    return HistoryService(storage)


@pytest.fixture
def favorites_service(storage: InMemoryKeyValueStorage) -> FavoritesService:
    return FavoritesService(storage)


@pytest.fixture
def preferences_service(storage: InMemoryKeyValueStorage) -> PreferencesService:
    return PreferencesService(storage)


@pytest.fixture
def stats_service(
    history_service: HistoryService,
    favorites_service: FavoritesService,
    preferences_service: PreferencesService,
) -> StatsService:
    return StatsService(
        history=history_service,
        favorites=favorites_service,
        preferences=preferences_service,
    )


@pytest.fixture
def recipe_client() -> FakeRecipeClient:
    return FakeRecipeClient()


@pytest.fixture
def container(
    settings: Settings,
    storage: InMemoryKeyValueStorage,
    history_service: HistoryService,
    favorites_service: FavoritesService,
    preferences_service: PreferencesService,
    stats_service: StatsService,
) -> AppContainer:
    generation_service = RecipeGenerationService(
        synthesizer=TemplateSynthesizer(rng=random.Random(7)),
        history=history_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        storage=storage,
        history_service=history_service,
        favorites_service=favorites_service,
        preferences_service=preferences_service,
        stats_service=stats_service,
        generation_service=generation_service,
        close_resources=close_resources,
    )

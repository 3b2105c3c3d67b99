"""Tests for the recipe generation orchestrator."""

import asyncio
import random

import httpx

from leftover_chef.domain.errors import MalformedRemoteResponse
from leftover_chef.domain.generation import GenerationPreferences
from leftover_chef.domain.recipes import RecipeSource
from leftover_chef.services.generation import (
    EMPTY_INGREDIENTS_MESSAGE,
    IdGenerator,
    RecipeGenerationService,
)
from leftover_chef.services.history import HistoryService
from leftover_chef.services.synthesizer import TemplateSynthesizer
from tests.conftest import FakeRecipeClient, UnreachableKeyValueStorage


def _service(
    history: HistoryService | None = None,
    client: FakeRecipeClient | None = None,
    timeout_seconds: float = 5.0,
) -> RecipeGenerationService:
    return RecipeGenerationService(
        synthesizer=TemplateSynthesizer(rng=random.Random(1)),
        history=history,
        client=client,
        timeout_seconds=timeout_seconds,
    )


def test_generate_without_remote_uses_fallback(
    history_service: HistoryService,
) -> None:
    service = _service(history=history_service)

    result = asyncio.run(
        service.generate(["chicken"], GenerationPreferences(meal_type="dinner"))
    )

    assert result.success
    assert result.recipe is not None
    assert result.recipe.source == RecipeSource.FALLBACK
    chicken = [item for item in result.recipe.ingredients if item.name == "chicken"]
    assert chicken and chicken[0].is_leftover
    assert result.recipe.ai_insights is not None
    assert result.recipe.alternatives


def test_generate_records_history_before_returning(
    history_service: HistoryService,
) -> None:
    service = _service(history=history_service)

    result = asyncio.run(service.generate(["rice", "spinach"]))

    entries = history_service.list()
    assert result.recipe is not None
    assert [entry.recipe.id for entry in entries] == [result.recipe.id]


def test_generate_rejects_empty_ingredients_without_remote_call(
    history_service: HistoryService, recipe_client: FakeRecipeClient
) -> None:
    service = _service(history=history_service, client=recipe_client)

    result = asyncio.run(service.generate(["", "  "], GenerationPreferences()))

    assert not result.success
    assert result.error == EMPTY_INGREDIENTS_MESSAGE
    assert recipe_client.calls == []
    assert history_service.list() == []


def test_generate_uses_remote_recipe(recipe_client: FakeRecipeClient) -> None:
    service = _service(client=recipe_client)

    result = asyncio.run(
        service.generate(
            ["chicken", "rice"],
            GenerationPreferences(
                meal_type="lunch",
                dietary_preferences=["vegan", "gluten-free"],
                cooking_time=25,
                serving_size=2,
            ),
        )
    )

    assert result.recipe is not None
    assert result.recipe.source == RecipeSource.REMOTE
    assert result.recipe.title == "Chicken Rice Bowl"
    assert result.recipe.ai_insights is not None
    assert result.recipe.ai_insights.tips == ["Season well"]
    assert result.recipe.alternatives[0].title == "Spicy Version"
    assert result.recipe.ingredients[1].amount == "2"
    assert result.recipe.tags == [
        "healthy",
        "quick",
        "lunch",
        "easy",
        "leftover-friendly",
    ]
    _system, user_prompt = recipe_client.calls[0]
    assert "vegan, gluten-free" in user_prompt
    assert "lunch" in user_prompt
    assert "25 minutes" in user_prompt
    assert "Serves 2" in user_prompt


def test_generate_falls_back_on_transport_error() -> None:
    client = FakeRecipeClient(error=httpx.ConnectError("connection refused"))
    service = _service(client=client)

    result = asyncio.run(
        service.generate(["chicken"], GenerationPreferences(meal_type="dinner"))
    )

    assert result.success
    assert result.recipe is not None
    assert result.recipe.source == RecipeSource.FALLBACK
    assert "chicken" in result.recipe.title.lower()
    assert len(client.calls) == 1


def test_generate_falls_back_on_malformed_response() -> None:
    client = FakeRecipeClient(error=MalformedRemoteResponse("invalid JSON"))
    service = _service(client=client)

    result = asyncio.run(service.generate(["chicken"]))

    assert result.recipe is not None
    assert result.recipe.source == RecipeSource.FALLBACK


def test_generate_falls_back_on_ill_shaped_payload() -> None:
    for payload in ({"title": "Only a title"}, {}, ["not", "an", "object"], None):
        client = FakeRecipeClient(payload=payload)
        service = _service(client=client)

        result = asyncio.run(service.generate(["chicken"]))

        assert result.recipe is not None
        assert result.recipe.source == RecipeSource.FALLBACK


def test_generate_falls_back_on_timeout() -> None:
    class SlowClient(FakeRecipeClient):
        async def generate(self, *, system_prompt: str, user_prompt: str) -> object:
            await asyncio.sleep(1)
            return self.payload

    service = _service(client=SlowClient(), timeout_seconds=0.01)

    result = asyncio.run(service.generate(["chicken"]))

    assert result.recipe is not None
    assert result.recipe.source == RecipeSource.FALLBACK


def test_generated_ids_are_unique() -> None:
    service = _service()

    first = asyncio.run(service.generate(["eggs"]))
    second = asyncio.run(service.generate(["eggs"]))

    assert first.recipe is not None and second.recipe is not None
    assert first.recipe.id != second.recipe.id


def test_id_generator_is_strictly_increasing() -> None:
    generator = IdGenerator()

    ids = [generator() for _ in range(100)]

    assert ids == sorted(set(ids))


def test_generate_returns_recipe_when_history_storage_is_unreachable() -> None:
    history = HistoryService(UnreachableKeyValueStorage())
    service = _service(history=history)

    result = asyncio.run(service.generate(["chicken"]))

    assert result.success
    assert result.recipe is not None
    assert result.recipe.source == RecipeSource.FALLBACK

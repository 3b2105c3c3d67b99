"""Tests for container wiring."""

import asyncio
from pathlib import Path

from leftover_chef.adapters.file_storage import FileKeyValueStorage
from leftover_chef.adapters.memory_storage import InMemoryKeyValueStorage
from leftover_chef.adapters.openai_recipe_client import OpenAIRecipeClient
from leftover_chef.config import Settings, remote_generation_enabled
from leftover_chef.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.storage, InMemoryKeyValueStorage)
    assert container.generation_service.client is None
    assert container.generation_service.history is container.history_service
    assert container.stats_service.history is container.history_service
    asyncio.run(container.close_resources())


def test_build_container_with_openai_and_file_storage(tmp_path: Path) -> None:
    settings = Settings(
        openai_api_key="openai-key",
        storage_backend="file",
        storage_path=str(tmp_path / "store"),
        history_capacity=10,
    )

    container = build_container(settings)

    assert isinstance(container.storage, FileKeyValueStorage)
    assert isinstance(container.generation_service.client, OpenAIRecipeClient)
    assert container.history_service.capacity == 10
    asyncio.run(container.close_resources())


def test_remote_generation_enabled_ignores_blank_key() -> None:
    assert remote_generation_enabled(Settings(openai_api_key="  ")) is False
    assert remote_generation_enabled(Settings(openai_api_key="key")) is True

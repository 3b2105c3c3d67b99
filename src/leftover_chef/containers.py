"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from leftover_chef.adapters.file_storage import FileKeyValueStorage
from leftover_chef.adapters.memory_storage import InMemoryKeyValueStorage
from leftover_chef.adapters.openai_recipe_client import OpenAIRecipeClient
from leftover_chef.adapters.supabase_storage import SupabaseKeyValueStorage
from leftover_chef.config import Settings, remote_generation_enabled
from leftover_chef.services.favorites import FavoritesService
from leftover_chef.services.generation import RecipeGenerationService
from leftover_chef.services.history import HistoryService
from leftover_chef.services.preferences import PreferencesService
from leftover_chef.services.stats import StatsService
from leftover_chef.services.storage import KeyValueStorage
from leftover_chef.services.synthesizer import TemplateSynthesizer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStorage
    history_service: HistoryService
    favorites_service: FavoritesService
    preferences_service: PreferencesService
    stats_service: StatsService
    generation_service: RecipeGenerationService
    close_resources: Callable[[], Awaitable[None]]


def build_storage(settings: Settings) -> KeyValueStorage:
    """Create the storage adapter selected by settings."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStorage()
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires URL and service key")
        return SupabaseKeyValueStorage(
            create_client(settings.supabase_url, settings.supabase_service_key)
        )
    return FileKeyValueStorage.create(settings.storage_path)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    storage = build_storage(resolved_settings)
    history_service = HistoryService(
        storage, capacity=resolved_settings.history_capacity
    )
    favorites_service = FavoritesService(storage)
    preferences_service = PreferencesService(storage)
    stats_service = StatsService(
        history=history_service,
        favorites=favorites_service,
        preferences=preferences_service,
    )
    recipe_client = None
    if remote_generation_enabled(resolved_settings):
        recipe_client = OpenAIRecipeClient.create(
            resolved_settings.openai_api_key or "",
            model=resolved_settings.openai_model,
            temperature=resolved_settings.openai_temperature,
            max_tokens=resolved_settings.openai_max_tokens,
            timeout_seconds=resolved_settings.openai_timeout_seconds,
        )
    generation_service = RecipeGenerationService(
        synthesizer=TemplateSynthesizer(),
        history=history_service,
        client=recipe_client,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )

    async def close_resources() -> None:
        if recipe_client is not None:
            await recipe_client.close()

    return AppContainer(
        settings=resolved_settings,
        storage=storage,
        history_service=history_service,
        favorites_service=favorites_service,
        preferences_service=preferences_service,
        stats_service=stats_service,
        generation_service=generation_service,
        close_resources=close_resources,
    )

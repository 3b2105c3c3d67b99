"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from leftover_chef.api.admin import router as admin_router
from leftover_chef.api.models import (
    GenerateRecipeRequest,
    SaveFavoriteRequest,
    UpdateNotesRequest,
)
from leftover_chef.api.serializers import dump
from leftover_chef.app_logging import configure_logging
from leftover_chef.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/recipes/generate")
    async def generate_recipe(
        body: GenerateRecipeRequest, request: Request
    ) -> JSONResponse:
        """Generate a recipe and record it in history."""
        result = await _container(request).generation_service.generate(
            body.ingredients, body.preferences()
        )
        if not result.success or result.recipe is None:
            return JSONResponse(
                status_code=422,
                content={"success": False, "error": result.error},
            )
        logger.info(
            "Generated recipe %s from %s", result.recipe.id, result.recipe.source
        )
        return JSONResponse(content={"success": True, "recipe": dump(result.recipe)})

    @app.get("/history")
    async def list_history(request: Request) -> dict[str, object]:
        """Return history entries, most recent first."""
        entries = _container(request).history_service.list()
        return {"history": [dump(entry) for entry in entries]}

    @app.delete("/history/{recipe_id}")
    async def remove_history(recipe_id: int, request: Request) -> dict[str, str]:
        """Remove one recipe from history."""
        history = _container(request).history_service
        if history.get(recipe_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        if not history.remove(recipe_id):
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE)
        return {"status": "ok"}

    @app.delete("/history")
    async def clear_history(request: Request) -> dict[str, str]:
        """Remove every history entry."""
        if not _container(request).history_service.clear():
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE)
        return {"status": "ok"}

    @app.get("/favorites")
    async def list_favorites(
        request: Request, category: str | None = None
    ) -> dict[str, object]:
        """Return saved recipes, optionally filtered by category."""
        favorites = _container(request).favorites_service
        entries = (
            favorites.list_by_category(category) if category else favorites.list()
        )
        return {"favorites": [dump(entry) for entry in entries]}

    @app.get("/favorites/categories")
    async def list_categories(request: Request) -> dict[str, list[str]]:
        """Return the user's favorite categories."""
        return {"categories": _container(request).favorites_service.list_categories()}

    @app.put("/favorites/{recipe_id}")
    async def save_favorite(
        recipe_id: int, body: SaveFavoriteRequest, request: Request
    ) -> dict[str, str]:
        """Save a recipe from history to favorites."""
        state_container = _container(request)
        entry = state_container.history_service.get(recipe_id)
        if entry is None:
            existing = state_container.favorites_service.get(recipe_id)
            if existing is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
            recipe = existing.recipe
        else:
            recipe = entry.recipe
        if not state_container.favorites_service.save(recipe, body.category):
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE)
        return {"status": "ok"}

    @app.delete("/favorites/{recipe_id}")
    async def unsave_favorite(recipe_id: int, request: Request) -> dict[str, str]:
        """Remove a recipe from favorites."""
        favorites = _container(request).favorites_service
        if not favorites.is_saved(recipe_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        if not favorites.unsave(recipe_id):
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE)
        return {"status": "ok"}

    @app.put("/favorites/{recipe_id}/notes")
    async def update_notes(
        recipe_id: int, body: UpdateNotesRequest, request: Request
    ) -> dict[str, str]:
        """Replace the notes of a saved recipe."""
        favorites = _container(request).favorites_service
        if not favorites.is_saved(recipe_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        if not favorites.update_notes(recipe_id, body.notes):
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE)
        return {"status": "ok"}

    @app.get("/preferences")
    async def get_preferences(request: Request) -> dict[str, object]:
        """Return stored user preferences."""
        return _container(request).preferences_service.get()

    @app.put("/preferences")
    async def save_preferences(
        body: dict[str, object], request: Request
    ) -> dict[str, str]:
        """Persist user preferences."""
        if not _container(request).preferences_service.save(body):
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE)
        return {"status": "ok"}

    @app.delete("/preferences")
    async def clear_preferences(request: Request) -> dict[str, str]:
        """Remove stored user preferences."""
        if not _container(request).preferences_service.clear():
            raise HTTPException(status_code=status.HTTP_507_INSUFFICIENT_STORAGE)
        return {"status": "ok"}

    return app

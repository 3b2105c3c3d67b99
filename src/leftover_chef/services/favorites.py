"""User-curated collection of saved recipes."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from leftover_chef.domain.errors import PersistenceReadFailure
from leftover_chef.domain.recipes import FavoriteEntry, Recipe
from leftover_chef.services.storage import (
    FAVORITES_KEY,
    KeyValueStorage,
    delete_value,
    load_json,
    save_json,
)

DEFAULT_CATEGORY = "uncategorized"

_ENTRIES = TypeAdapter(list[FavoriteEntry])
_logger = logging.getLogger(__name__)


@dataclass
class FavoritesService:
    """Uncapped favorites keyed by recipe id."""

    storage: KeyValueStorage
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def save(self, recipe: Recipe | None, category: str | None = None) -> bool:
        """Save a recipe, updating the existing entry when already saved.

        A re-save without a category keeps the category already chosen.
        """
        if recipe is None:
            return False
        requested = category.strip() if category and category.strip() else None
        with self.lock:
            try:
                entries = self._load()
            except PersistenceReadFailure as exc:
                _logger.error("Not saving recipe %s: %s", recipe.id, exc)
                return False
            now = datetime.now(tz=UTC)
            for index, entry in enumerate(entries):
                if entry.recipe.id == recipe.id:
                    entries[index] = entry.model_copy(
                        update={
                            "recipe": recipe,
                            "category": requested or entry.category,
                            "updated_at": now,
                        }
                    )
                    break
            else:
                entries.insert(
                    0,
                    FavoriteEntry(
                        recipe=recipe,
                        saved_at=now,
                        category=requested or _default_category(recipe),
                    ),
                )
            return self._save(entries)

    def unsave(self, recipe_id: int) -> bool:
        """Remove a saved recipe; False when absent or the write fails."""
        with self.lock:
            try:
                entries = self._load()
            except PersistenceReadFailure as exc:
                _logger.error("Not removing favorite %s: %s", recipe_id, exc)
                return False
            remaining = [entry for entry in entries if entry.recipe.id != recipe_id]
            if len(remaining) == len(entries):
                return False
            return self._save(remaining)

    def is_saved(self, recipe_id: int) -> bool:
        return any(entry.recipe.id == recipe_id for entry in self.list())

    def update_notes(self, recipe_id: int, notes: str) -> bool:
        """Replace the notes of a saved recipe."""
        with self.lock:
            try:
                entries = self._load()
            except PersistenceReadFailure as exc:
                _logger.error("Not updating notes for %s: %s", recipe_id, exc)
                return False
            for index, entry in enumerate(entries):
                if entry.recipe.id == recipe_id:
                    entries[index] = entry.model_copy(
                        update={"notes": notes, "updated_at": datetime.now(tz=UTC)}
                    )
                    return self._save(entries)
        return False

    def get(self, recipe_id: int) -> FavoriteEntry | None:
        for entry in self.list():
            if entry.recipe.id == recipe_id:
                return entry
        return None

    def list(self) -> list[FavoriteEntry]:
        """Return saved recipes, most recently saved first."""
        try:
            return self._load()
        except PersistenceReadFailure as exc:
            _logger.error("Could not read favorites: %s", exc)
            return []

    def list_by_category(self, category: str) -> list[FavoriteEntry]:
        return [entry for entry in self.list() if entry.category == category]

    def list_categories(self) -> list[str]:
        """Return distinct user categories, sorted, without the default one."""
        categories = {entry.category for entry in self.list()}
        return sorted(
            category
            for category in categories
            if category and category != DEFAULT_CATEGORY
        )

    def clear(self) -> bool:
        with self.lock:
            return delete_value(self.storage, FAVORITES_KEY)

    def _load(self) -> list[FavoriteEntry]:
        raw = load_json(self.storage, FAVORITES_KEY, [])
        try:
            return _ENTRIES.validate_python(raw)
        except SchemaValidationError as exc:
            _logger.error("Discarding malformed favorites: %s", exc.error_count())
            return []

    def _save(self, entries: list[FavoriteEntry]) -> bool:
        return save_json(
            self.storage,
            FAVORITES_KEY,
            _ENTRIES.dump_python(entries, mode="json", by_alias=True),
        )


def _default_category(recipe: Recipe) -> str:
    return str(recipe.meal_type) if recipe.meal_type else DEFAULT_CATEGORY

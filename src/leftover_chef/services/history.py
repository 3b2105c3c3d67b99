"""Bounded, deduplicated history of generated recipes."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from leftover_chef.domain.errors import PersistenceReadFailure
from leftover_chef.domain.recipes import HistoryEntry, Recipe
from leftover_chef.services.storage import (
    HISTORY_KEY,
    KeyValueStorage,
    delete_value,
    load_json,
    save_json,
)

HISTORY_CAPACITY = 50

_ENTRIES = TypeAdapter(list[HistoryEntry])
_logger = logging.getLogger(__name__)


@dataclass
class HistoryService:
    """Most-recent-first log of recipes with per-recipe view counts."""

    storage: KeyValueStorage
    capacity: int = HISTORY_CAPACITY
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def record(self, recipe: Recipe | None) -> bool:
        """Add a recipe, or bump its view count when the id is already present."""
        if recipe is None:
            return False
        with self.lock:
            try:
                entries = self._load()
            except PersistenceReadFailure as exc:
                _logger.error("Not recording recipe %s: %s", recipe.id, exc)
                return False
            now = datetime.now(tz=UTC)
            for index, entry in enumerate(entries):
                if entry.recipe.id == recipe.id:
                    entries[index] = entry.model_copy(
                        update={
                            "view_count": entry.view_count + 1,
                            "last_viewed_at": now,
                        }
                    )
                    break
            else:
                entries.insert(
                    0,
                    HistoryEntry(
                        recipe=recipe,
                        generated_at=recipe.created_at,
                        last_viewed_at=now,
                        view_count=1,
                    ),
                )
                del entries[self.capacity :]
            return self._save(entries)

    def list(self) -> list[HistoryEntry]:
        """Return history entries, most recent first; empty when unreadable."""
        try:
            return self._load()
        except PersistenceReadFailure as exc:
            _logger.error("Could not read history: %s", exc)
            return []

    def get(self, recipe_id: int) -> HistoryEntry | None:
        """Return the history entry for a recipe id, if present."""
        for entry in self.list():
            if entry.recipe.id == recipe_id:
                return entry
        return None

    def remove(self, recipe_id: int) -> bool:
        """Remove a recipe from history; False when absent or the write fails."""
        with self.lock:
            try:
                entries = self._load()
            except PersistenceReadFailure as exc:
                _logger.error("Not removing recipe %s: %s", recipe_id, exc)
                return False
            remaining = [entry for entry in entries if entry.recipe.id != recipe_id]
            if len(remaining) == len(entries):
                return False
            return self._save(remaining)

    def clear(self) -> bool:
        """Remove every history entry."""
        with self.lock:
            return delete_value(self.storage, HISTORY_KEY)

    def _load(self) -> list[HistoryEntry]:
        raw = load_json(self.storage, HISTORY_KEY, [])
        try:
            return _ENTRIES.validate_python(raw)
        except SchemaValidationError as exc:
            _logger.error("Discarding malformed history: %s", exc.error_count())
            return []

    def _save(self, entries: list[HistoryEntry]) -> bool:
        return save_json(
            self.storage,
            HISTORY_KEY,
            _ENTRIES.dump_python(entries, mode="json", by_alias=True),
        )

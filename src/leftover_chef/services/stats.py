"""Usage statistics over the history and favorites stores."""

import logging
from contextlib import ExitStack
from dataclasses import dataclass

from leftover_chef.domain.recipes import HistoryEntry
from leftover_chef.domain.stats import StorageStats
from leftover_chef.services.favorites import FavoritesService
from leftover_chef.services.history import HistoryService
from leftover_chef.services.preferences import PreferencesService
from leftover_chef.services.storage import (
    FAVORITES_KEY,
    HISTORY_KEY,
    PREFERENCES_KEY,
    stored_size,
)

RECENT_ACTIVITY_LIMIT = 5

_logger = logging.getLogger(__name__)


@dataclass
class StatsService:
    """Derives metrics on demand; nothing is cached."""

    history: HistoryService
    favorites: FavoritesService
    preferences: PreferencesService

    def compute_stats(self) -> StorageStats:
        """Return current usage statistics."""
        entries = self.history.list()
        return StorageStats(
            total_recipes_generated=len(entries),
            total_saved_recipes=len(self.favorites.list()),
            total_categories=len(self.favorites.list_categories()),
            most_viewed_recipe=_most_viewed(entries),
            recent_activity=entries[:RECENT_ACTIVITY_LIMIT],
            storage_used=self._storage_used(),
        )

    def clear_all(self) -> bool:
        """Empty history, favorites and preferences while holding every store lock."""
        with ExitStack() as stack:
            for store in (self.history, self.favorites, self.preferences):
                stack.enter_context(store.lock)
            cleared = [
                self.history.clear(),
                self.favorites.clear(),
                self.preferences.clear(),
            ]
        _logger.info("Cleared all stored recipe data")
        return all(cleared)

    def _storage_used(self) -> int:
        return (
            stored_size(self.history.storage, (HISTORY_KEY,))
            + stored_size(self.favorites.storage, (FAVORITES_KEY,))
            + stored_size(self.preferences.storage, (PREFERENCES_KEY,))
        )


def _most_viewed(entries: list[HistoryEntry]) -> HistoryEntry | None:
    """Return the entry with the highest view count; earlier entries win ties."""
    if not entries:
        return None
    best = entries[0]
    for entry in entries[1:]:
        if entry.view_count > best.view_count:
            best = entry
    if not best.view_count:
        return None
    return best

"""Domain models for usage statistics."""

from dataclasses import dataclass, field

from leftover_chef.domain.recipes import HistoryEntry


@dataclass(frozen=True)
class StorageStats:
    """Usage metrics derived from the history and favorites stores."""

    total_recipes_generated: int
    total_saved_recipes: int
    total_categories: int
    most_viewed_recipe: HistoryEntry | None
    recent_activity: list[HistoryEntry] = field(default_factory=list)
    storage_used: int = 0

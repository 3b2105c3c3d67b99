"""JSON shapes returned by the HTTP API."""

from leftover_chef.domain.recipes import CamelModel
from leftover_chef.domain.stats import StorageStats


def dump(model: CamelModel) -> dict[str, object]:
    return model.model_dump(mode="json", by_alias=True)


def serialize_stats(stats: StorageStats) -> dict[str, object]:
    most_viewed = stats.most_viewed_recipe
    return {
        "totalRecipesGenerated": stats.total_recipes_generated,
        "totalSavedRecipes": stats.total_saved_recipes,
        "totalCategories": stats.total_categories,
        "mostViewedRecipe": dump(most_viewed) if most_viewed else None,
        "recentActivity": [dump(entry) for entry in stats.recent_activity],
        "storageUsed": stats.storage_used,
    }

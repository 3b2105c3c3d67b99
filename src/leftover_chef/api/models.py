"""Request bodies accepted by the HTTP API."""

from pydantic import BaseModel, Field

from leftover_chef.domain.generation import GenerationPreferences


class GenerateRecipeRequest(GenerationPreferences):
    """Ingredients plus preferences for a generation request."""

    ingredients: list[str] = Field(default_factory=list)

    def preferences(self) -> GenerationPreferences:
        return GenerationPreferences.model_validate(
            self.model_dump(exclude={"ingredients"})
        )


class SaveFavoriteRequest(BaseModel):
    """Optional category for a saved recipe."""

    category: str | None = None


class UpdateNotesRequest(BaseModel):
    """Replacement notes for a saved recipe."""

    notes: str = ""

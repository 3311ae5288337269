"""Pydantic models for meal requests."""

from pydantic import BaseModel, ConfigDict, Field

from nutri_ai.domain.meals import MealDraft


class MealCreateRequest(BaseModel):
    """Body of a meal creation request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fats: float = Field(default=0, ge=0)

    def to_draft(self) -> MealDraft:
        """Convert the request into a domain draft."""
        return MealDraft(
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
        )

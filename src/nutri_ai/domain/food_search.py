"""Food search domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodSearchResult:
    """A food match with macros per 100g."""

    name: str
    calories: float
    protein: float
    carbs: float
    fats: float

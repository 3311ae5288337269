"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MealDraft:
    """Meal values supplied by a user before they are stored."""

    name: str
    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class Meal:
    """A stored meal row."""

    id: UUID
    user_id: UUID
    name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    created_at: datetime

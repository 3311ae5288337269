"""Meal logging business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutri_ai.domain.meals import Meal, MealDraft

DEFAULT_LIST_LIMIT = 50
MAX_LIST_LIMIT = 200


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(self, user_id: UUID, draft: MealDraft) -> Meal:
        """Store a meal for the user and return the stored row."""

    def list_meals(self, user_id: UUID, limit: int) -> list[Meal]:
        """Return the user's meals ordered by creation time, newest first."""


@dataclass
class MealService:
    """Application service for logging and listing meals."""

    repository: MealRepository

    def log_meal(self, user_id: UUID, draft: MealDraft) -> Meal:
        """Store a meal for the user."""
        return self.repository.create_meal(user_id, draft)

    def list_meals(self, user_id: UUID, limit: int = DEFAULT_LIST_LIMIT) -> list[Meal]:
        """Return recent meals for the user."""
        bounded = max(1, min(limit, MAX_LIST_LIMIT))
        return self.repository.list_meals(user_id, bounded)

"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutri_ai.domain.meals import Meal, MealDraft
from nutri_ai.services.meals import MealRepository

_MEAL_COLUMNS = "id, user_id, name, calories, protein, carbs, fats, created_at"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal persistence."""

    client: Client

    def create_meal(self, user_id: UUID, draft: MealDraft) -> Meal:
        """Insert a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": draft.name,
                    "calories": draft.calories,
                    "protein": draft.protein,
                    "carbs": draft.carbs,
                    "fats": draft.fats,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal in Supabase")
        return _parse_row(response.data[0])

    def list_meals(self, user_id: UUID, limit: int) -> list[Meal]:
        """Return the user's meals, newest first."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> Meal:
    created_at_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_at_raw)
        if isinstance(created_at_raw, str) and created_at_raw
        else datetime.min
    )
    return Meal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
        created_at=created_at,
    )

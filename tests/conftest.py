"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from nutri_ai.adapters.open_food_facts_client import OpenFoodFactsClient
from nutri_ai.config import Settings
from nutri_ai.containers import AppContainer
from nutri_ai.domain.meals import Meal, MealDraft
from nutri_ai.domain.models import AuthenticatedUser
from nutri_ai.services.auth import AuthGateway, AuthService
from nutri_ai.services.food_search import FoodSearchService
from nutri_ai.services.meals import MealRepository, MealService

USER_TOKEN = "user-token"


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with an in-memory response."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "products": [
                {
                    "product_name": "Mela",
                    "nutriments": {
                        "energy-kcal_100g": 52,
                        "proteins_100g": 0.3,
                        "carbohydrates_100g": 14,
                        "fat_100g": 0.2,
                    },
                },
                {"product_name": "Mela verde", "nutriments": {}},
            ]
        }
    )
    error: Exception | None = None
    calls: list[tuple[str, int]] = field(default_factory=list)

    async def search_products(
        self, query: str, page_size: int = 10
    ) -> dict[str, object]:
        self.calls.append((query, page_size))
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: list[Meal] = field(default_factory=list)
    last_limit: int | None = None

    def create_meal(self, user_id: UUID, draft: MealDraft) -> Meal:
        # Each insert is one second newer than the previous one.
        created_at = datetime(2025, 1, 1, tzinfo=UTC) + timedelta(
            seconds=len(self.meals)
        )
        meal = Meal(
            id=uuid4(),
            user_id=user_id,
            name=draft.name,
            calories=draft.calories,
            protein=draft.protein,
            carbs=draft.carbs,
            fats=draft.fats,
            created_at=created_at,
        )
        self.meals.append(meal)
        return meal

    def list_meals(self, user_id: UUID, limit: int) -> list[Meal]:
        self.last_limit = limit
        owned = [meal for meal in self.meals if meal.user_id == user_id]
        return sorted(owned, key=lambda meal: meal.created_at, reverse=True)[:limit]


@dataclass
class FakeAuthGateway(AuthGateway):
    """Fake identity provider keyed by access token."""

    users: dict[str, AuthenticatedUser] = field(default_factory=dict)
    error: Exception | None = None

    def get_user(self, access_token: str) -> AuthenticatedUser | None:
        if self.error is not None:
            raise self.error
        return self.users.get(access_token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def off_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def current_user() -> AuthenticatedUser:
    return AuthenticatedUser(id=uuid4(), email="utente@example.com")


@pytest.fixture
def container(
    settings: Settings,
    off_client: FakeOpenFoodFactsClient,
    meal_repository: InMemoryMealRepository,
    current_user: AuthenticatedUser,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_search_service=FoodSearchService(client=off_client),
        meal_service=MealService(meal_repository),
        auth_service=AuthService(FakeAuthGateway({USER_TOKEN: current_user})),
        close_resources=close_resources,
    )

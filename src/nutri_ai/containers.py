"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutri_ai.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from nutri_ai.adapters.supabase_auth_gateway import SupabaseAuthGateway
from nutri_ai.adapters.supabase_meal_repository import SupabaseMealRepository
from nutri_ai.config import Settings
from nutri_ai.services.auth import AuthService
from nutri_ai.services.food_search import FoodSearchService
from nutri_ai.services.meals import MealService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_search_service: FoodSearchService
    meal_service: MealService
    auth_service: AuthService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    off_client = HttpxOpenFoodFactsClient.create(
        search_url=resolved_settings.off_search_url,
        timeout_seconds=resolved_settings.off_timeout_seconds,
        user_agent=resolved_settings.off_user_agent,
    )
    food_search_service = FoodSearchService(
        client=off_client,
        debug=resolved_settings.debug,
    )
    meal_service = MealService(SupabaseMealRepository(supabase_client))
    auth_service = AuthService(SupabaseAuthGateway(supabase_client))

    async def close_resources() -> None:
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_search_service=food_search_service,
        meal_service=meal_service,
        auth_service=auth_service,
        close_resources=close_resources,
    )

"""Tests for meal service."""

from uuid import uuid4

from nutri_ai.domain.meals import MealDraft
from nutri_ai.services.meals import MAX_LIST_LIMIT, MealService
from tests.conftest import InMemoryMealRepository


def _draft(name: str) -> MealDraft:
    return MealDraft(name=name, calories=300, protein=20, carbs=30, fats=10)


def test_log_meal_stores_for_user() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()

    meal = service.log_meal(user_id, _draft("Colazione"))

    assert meal.user_id == user_id
    assert repository.meals == [meal]


def test_list_meals_scoped_to_user_and_newest_first() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)
    user_id = uuid4()
    other_id = uuid4()

    service.log_meal(user_id, _draft("Colazione"))
    service.log_meal(other_id, _draft("Spuntino"))
    service.log_meal(user_id, _draft("Pranzo"))

    meals = service.list_meals(user_id)

    assert [meal.name for meal in meals] == ["Pranzo", "Colazione"]


def test_list_meals_bounds_limit() -> None:
    repository = InMemoryMealRepository()
    service = MealService(repository)

    service.list_meals(uuid4(), limit=10_000)
    assert repository.last_limit == MAX_LIST_LIMIT

    service.list_meals(uuid4(), limit=0)
    assert repository.last_limit == 1

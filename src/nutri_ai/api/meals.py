"""Meal log endpoints for authenticated users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from nutri_ai.api.meal_models import MealCreateRequest  # noqa: TC001
from nutri_ai.domain.errors import IdentityProviderUnavailableError
from nutri_ai.domain.models import AuthenticatedUser  # noqa: TC001
from nutri_ai.services.meals import DEFAULT_LIST_LIMIT

if TYPE_CHECKING:
    from nutri_ai.containers import AppContainer

router = APIRouter(tags=["meals"])


def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> AuthenticatedUser:
    """Resolve the bearer token to a user or reject the request."""
    container: AppContainer = request.app.state.container
    try:
        user = container.auth_service.current_user(authorization)
    except IdentityProviderUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Identity provider unavailable",
        ) from exc
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


@router.get("/me")
async def me(user: AuthenticatedUser = Depends(require_user)) -> dict[str, object]:
    """Return the current user."""
    return {"id": str(user.id), "email": user.email}


@router.get("/meals")
async def list_meals(
    request: Request,
    limit: int = DEFAULT_LIST_LIMIT,
    user: AuthenticatedUser = Depends(require_user),
) -> dict[str, object]:
    """Return the current user's meals, newest first."""
    container: AppContainer = request.app.state.container
    return {"meals": container.meal_service.list_meals(user.id, limit)}


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def create_meal(
    body: MealCreateRequest,
    request: Request,
    user: AuthenticatedUser = Depends(require_user),
) -> dict[str, object]:
    """Log a meal for the current user."""
    container: AppContainer = request.app.state.container
    try:
        meal = container.meal_service.log_meal(user.id, body.to_draft())
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc
    return {"meal": meal}

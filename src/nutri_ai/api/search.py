"""Food search endpoint with a permissive CORS contract."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from nutri_ai.api.search_models import SearchFoodRequest
from nutri_ai.domain.errors import FoodSearchError

if TYPE_CHECKING:
    from nutri_ai.containers import AppContainer

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type"
    ),
}
UNEXPECTED_ERROR_MESSAGE = "Errore imprevisto durante la ricerca."

router = APIRouter(tags=["search"])
_logger = logging.getLogger(__name__)


@router.options("/search-food")
async def search_food_preflight() -> PlainTextResponse:
    """Answer browser pre-flight requests."""
    return PlainTextResponse("ok", headers=CORS_HEADERS)


@router.post("/search-food")
async def search_food(request: Request) -> JSONResponse:
    """Search foods by name and return those with calorie data."""
    container: AppContainer = request.app.state.container
    try:
        payload = SearchFoodRequest.model_validate_json(await request.body())
    except ValidationError:
        payload = SearchFoodRequest()

    try:
        foods = await container.food_search_service.search(payload.query)
    except FoodSearchError as exc:
        return _error_response(exc.message)
    except Exception:
        _logger.exception("Food search failed")
        return _error_response(UNEXPECTED_ERROR_MESSAGE)

    return JSONResponse(
        {"foods": [asdict(food) for food in foods]},
        status_code=status.HTTP_200_OK,
        headers=CORS_HEADERS,
    )


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        {"error": message},
        status_code=status.HTTP_400_BAD_REQUEST,
        headers=CORS_HEADERS,
    )

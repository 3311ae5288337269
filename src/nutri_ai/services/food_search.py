"""Food search backed by Open Food Facts."""

import json
import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from nutri_ai.adapters.open_food_facts_client import OpenFoodFactsClient
from nutri_ai.domain.errors import (
    InvalidRequestError,
    MalformedUpstreamPayloadError,
    UpstreamUnavailableError,
)
from nutri_ai.domain.food_search import FoodSearchResult
from nutri_ai.domain.off_models import OffProduct, OffSearchResponse

PAGE_SIZE = 10
MISSING_QUERY_MESSAGE = "Il termine di ricerca (query) è obbligatorio."
MISSING_NAME = "Nome non disponibile"

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Looks up foods by name and returns those with known calories."""

    client: OpenFoodFactsClient
    page_size: int = PAGE_SIZE
    debug: bool = False

    async def search(self, query: str | None) -> list[FoodSearchResult]:
        """Search foods, dropping products without a positive calorie value.

        Raises ``InvalidRequestError`` before any outbound call when the query
        is missing or blank, ``UpstreamUnavailableError`` when the call fails,
        and ``MalformedUpstreamPayloadError`` when the body cannot be read.
        """
        if query is None or not query.strip():
            raise InvalidRequestError(MISSING_QUERY_MESSAGE)

        payload = await self._fetch(query)
        try:
            parsed = OffSearchResponse.model_validate(payload)
        except ValidationError as exc:
            _logger.warning("Unexpected Open Food Facts payload: %s", exc)
            raise MalformedUpstreamPayloadError(
                "Risposta non valida dal database nutrizionale."
            ) from exc

        foods = [_to_result(product) for product in parsed.products]
        foods = [food for food in foods if food.calories > 0][: self.page_size]
        if self.debug:
            _logger.info(
                "Food search: query=%s products=%s results=%s",
                query,
                len(parsed.products),
                len(foods),
            )
        return foods

    async def _fetch(self, query: str) -> dict[str, object]:
        try:
            return await self.client.search_products(query, page_size=self.page_size)
        except httpx.HTTPStatusError as exc:
            _logger.warning(
                "Open Food Facts returned status %s", exc.response.status_code
            )
            reason = exc.response.reason_phrase or str(exc.response.status_code)
            raise UpstreamUnavailableError(f"Errore dalla rete: {reason}") from exc
        except httpx.TimeoutException as exc:
            _logger.warning("Open Food Facts timed out: %r", exc)
            raise UpstreamUnavailableError(
                "Errore dalla rete: tempo di attesa scaduto"
            ) from exc
        except httpx.HTTPError as exc:
            _logger.warning("Open Food Facts request failed: %r", exc)
            raise UpstreamUnavailableError(f"Errore dalla rete: {exc}") from exc
        except json.JSONDecodeError as exc:
            _logger.warning("Open Food Facts returned invalid JSON: %s", exc)
            raise MalformedUpstreamPayloadError(
                "Risposta non valida dal database nutrizionale."
            ) from exc


def _to_result(product: OffProduct) -> FoodSearchResult:
    """Apply per-field defaults to an upstream product."""
    nutriments = product.nutriments
    return FoodSearchResult(
        name=product.product_name or MISSING_NAME,
        calories=nutriments.energy_kcal_100g or 0,
        protein=nutriments.proteins_100g or 0,
        carbs=nutriments.carbohydrates_100g or 0,
        fats=nutriments.fat or 0,
    )

"""Pydantic models for food search requests."""

from pydantic import BaseModel


class SearchFoodRequest(BaseModel):
    """Body of a food search request."""

    query: str | None = None

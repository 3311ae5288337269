"""Pydantic models for Open Food Facts search payloads.

Every field the proxy reads is optional: Open Food Facts products are
crowd-sourced and routinely miss names or nutrient values. Values that are
present but not numeric are treated as missing.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OffNutriments(BaseModel):
    """Per-100g nutrient values of a product."""

    model_config = ConfigDict(populate_by_name=True)

    energy_kcal_100g: float | None = Field(default=None, alias="energy-kcal_100g")
    proteins_100g: float | None = None
    carbohydrates_100g: float | None = None
    fat_100g: float | None = None
    fats_100g: float | None = None

    @field_validator(
        "energy_kcal_100g",
        "proteins_100g",
        "carbohydrates_100g",
        "fat_100g",
        "fats_100g",
        mode="before",
    )
    @classmethod
    def _coerce_number(cls, value: object) -> float | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int | float):
            number = float(value)
        elif isinstance(value, str):
            try:
                number = float(value.strip().replace(",", "."))
            except ValueError:
                return None
        else:
            return None
        if math.isnan(number) or math.isinf(number):
            return None
        return number

    @property
    def fat(self) -> float | None:
        """Fat per 100g, falling back to the legacy key."""
        if self.fat_100g is not None:
            return self.fat_100g
        return self.fats_100g


class OffProduct(BaseModel):
    """A single product from the search results."""

    product_name: str | None = None
    nutriments: OffNutriments = Field(default_factory=OffNutriments)

    @field_validator("product_name", mode="before")
    @classmethod
    def _coerce_name(cls, value: object) -> str | None:
        if isinstance(value, str):
            return value
        return None

    @field_validator("nutriments", mode="before")
    @classmethod
    def _coerce_nutriments(cls, value: object) -> object:
        if isinstance(value, dict):
            return value
        return {}


class OffSearchResponse(BaseModel):
    """Open Food Facts search response envelope."""

    products: list[OffProduct]

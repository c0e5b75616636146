"""Typed payload contracts for ParseService results.

Payloads are validated against these models before they leave the
service layer, so renderers and JSON consumers can rely on key names
(for example ``items`` and ``canonical``) without defensive lookups.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class IndexItem(BaseModel):
    """One parsed index."""

    one_based: int
    zero_based: int
    canonical: str


class IndicesResultData(BaseModel):
    """Payload contract for ``ParseService.indices``."""

    count: int
    items: list[IndexItem]


class TextResultData(BaseModel):
    """Payload contract for single text fields (title, description)."""

    value: str
    canonical: str


class TextItem(BaseModel):
    """One parsed step or tag."""

    position: int
    value: str
    canonical: str


class TextListResultData(BaseModel):
    """Payload contract for ``ParseService.steps`` and ``ParseService.tags``."""

    count: int
    items: list[TextItem]


class IngredientItem(BaseModel):
    """One parsed ingredient with its computed cost."""

    name: str
    quantity: float
    unit: str
    price_per_unit: float
    cost: float
    canonical: str


class IngredientsResultData(BaseModel):
    """Payload contract for ``ParseService.ingredients``."""

    count: int
    items: list[IngredientItem]
    total_cost: float


class PriceFilterResultData(BaseModel):
    """Payload contract for ``ParseService.price_filter``."""

    symbol: str
    price: float
    canonical: str
    checked_price: float | None = None
    matches: bool | None = None


class SortDirectionResultData(BaseModel):
    """Payload contract for ``ParseService.sort_direction``."""

    ascending: bool
    canonical: str

"""Recipe value objects.

Each model is frozen (hashable, compared by value) and renders to a
canonical string that the input parser accepts back unchanged.  Content
rules are not enforced here; they live in :mod:`recipectl.domain.rules`
and are applied by the parser before construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field


class SortOrder(StrEnum):
    """Accepted sort-order tokens."""

    ASC = "asc"
    DESC = "desc"


class PriceSymbol(StrEnum):
    """Comparison symbols accepted by the price filter."""

    BELOW = "<"
    ABOVE = ">"


class _TextValue(BaseModel):
    model_config = {"frozen": True}

    value: str

    def __str__(self) -> str:
        return self.value


class Title(_TextValue):
    """Recipe title."""


class Description(_TextValue):
    """Free-form recipe description."""


class Step(_TextValue):
    """One preparation step."""


class Tag(_TextValue):
    """Single-word recipe label."""


class Ingredient(BaseModel):
    """An ingredient line: what, how much, in which unit, at what unit price."""

    model_config = {"frozen": True}

    name: str
    quantity: float
    unit: str
    price_per_unit: float

    @property
    def cost(self) -> float:
        return self.quantity * self.price_per_unit

    def __str__(self) -> str:
        return f"{self.name}, {self.quantity}, {self.unit}, {self.price_per_unit}"


def total_cost(ingredients: Iterable[Ingredient]) -> float:
    """Recipe price: the summed cost of its ingredients."""
    return sum((i.cost for i in ingredients), 0.0)


class PriceCondition(BaseModel):
    """Filter condition comparing a recipe's price against a bound.

    Comparisons are strict: ``< 10`` excludes a recipe costing exactly 10.
    """

    model_config = {"frozen": True}

    symbol: Literal["<", ">"]
    price: float = Field(ge=0)

    def matches(self, recipe_price: float) -> bool:
        if self.symbol == PriceSymbol.BELOW:
            return recipe_price < self.price
        return recipe_price > self.price

    def __str__(self) -> str:
        return f"{self.symbol} {self.price}"

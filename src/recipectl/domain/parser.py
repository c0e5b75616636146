"""InputParser — raw user-typed strings to validated recipe value objects.

Every ``parse_*`` method trims its input, checks format, consults the
injected :class:`RuleSet`, and either returns a value object or raises
:class:`ParseError` on the first violation.  No method returns a
partially valid result.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from recipectl.domain.errors import (
    MESSAGE_INGREDIENT_WRONG_ARGUMENTS,
    MESSAGE_INVALID_DIRECTION,
    MESSAGE_INVALID_INDEX,
    MESSAGE_NEGATIVE_PRICE,
    MESSAGE_PRICE_NOT_NUMBER,
    MESSAGE_PRICE_PER_UNIT_NOT_NUMBER,
    MESSAGE_QUANTITY_NOT_NUMBER,
    MESSAGE_UNRECOGNIZED_SYMBOL,
    MESSAGE_WRONG_ARGUMENT_COUNT,
    ParseError,
)
from recipectl.domain.index import Index, is_non_zero_unsigned_integer
from recipectl.domain.recipe import (
    Description,
    Ingredient,
    PriceCondition,
    PriceSymbol,
    SortOrder,
    Step,
    Tag,
    Title,
)
from recipectl.domain.rules import Rule, RuleSet

INDEX_SEPARATOR = ","
INGREDIENT_SEPARATOR = ","
INGREDIENT_FIELD_COUNT = 4


# Plain ASCII decimal literal: no digit separators or non-ASCII digits.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_number(text: str) -> float | None:
    """Return *text* as a finite float, or None if it is not one."""
    if not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def _split_fields(text: str, separator: str) -> list[str]:
    """Split on *separator*, dropping trailing empty segments.

    Leading and interior empty segments are kept so they still fail
    validation.  At least one segment is always returned.
    """
    parts = text.split(separator)
    while len(parts) > 1 and not parts[-1]:
        parts.pop()
    return parts


class InputParser:
    """Stateless string-to-value-object conversions.

    Args:
        rules: Validity predicates for each field. Defaults to
            :meth:`RuleSet.default`.
    """

    def __init__(self, rules: RuleSet | None = None) -> None:
        self._rules = rules or RuleSet.default()

    @property
    def rules(self) -> RuleSet:
        return self._rules

    # ── Indices ──────────────────────────────────────────────────────

    def parse_index(self, text: str) -> Index:
        """Parse a one-based index such as ``" 3 "``."""
        trimmed = text.strip()
        if not is_non_zero_unsigned_integer(trimmed):
            raise ParseError(MESSAGE_INVALID_INDEX, "invalid_index")
        return Index.from_one_based(int(trimmed))

    def parse_indices(self, text: str) -> list[Index]:
        """Parse comma-separated one-based indices, keeping their order."""
        return [self.parse_index(part) for part in _split_fields(text, INDEX_SEPARATOR)]

    # ── Single-value text fields ─────────────────────────────────────

    def parse_title(self, text: str) -> Title:
        return Title(value=self._check_text(text, self._rules.title, "invalid_title"))

    def parse_description(self, text: str) -> Description:
        return Description(
            value=self._check_text(text, self._rules.description, "invalid_description")
        )

    def parse_step(self, text: str) -> Step:
        return Step(value=self._check_text(text, self._rules.step, "invalid_step"))

    def parse_steps(self, texts: Iterable[str]) -> list[Step]:
        """Parse each step in order; the first invalid one aborts the batch."""
        return [self.parse_step(text) for text in texts]

    def parse_tag(self, text: str) -> Tag:
        return Tag(value=self._check_text(text, self._rules.tag, "invalid_tag"))

    def parse_tags(self, texts: Iterable[str]) -> set[Tag]:
        """Parse tags into a set; repeated tags collapse into one."""
        return {self.parse_tag(text) for text in texts}

    # ── Ingredients ──────────────────────────────────────────────────

    def parse_ingredient(self, text: str) -> Ingredient:
        """Parse ``"name, quantity, unit, price per unit"``.

        Fields are checked in order: name, quantity format, quantity
        value, unit, price format, price value.
        """
        fields = [field.strip() for field in _split_fields(text.strip(), INGREDIENT_SEPARATOR)]
        if len(fields) != INGREDIENT_FIELD_COUNT:
            raise ParseError(MESSAGE_INGREDIENT_WRONG_ARGUMENTS, "wrong_argument_count")
        name, raw_quantity, unit, raw_price = fields

        rules = self._rules
        if not rules.ingredient_name.accepts(name):
            raise ParseError(rules.ingredient_name.message, "invalid_ingredient_name")

        quantity = _parse_number(raw_quantity)
        if quantity is None:
            raise ParseError(MESSAGE_QUANTITY_NOT_NUMBER, "quantity_not_number")
        if not rules.quantity.accepts(quantity):
            raise ParseError(rules.quantity.message, "invalid_quantity")

        if not rules.unit.accepts(unit):
            raise ParseError(rules.unit.message, "invalid_unit")

        price_per_unit = _parse_number(raw_price)
        if price_per_unit is None:
            raise ParseError(MESSAGE_PRICE_PER_UNIT_NOT_NUMBER, "price_not_number")
        if not rules.price_per_unit.accepts(price_per_unit):
            raise ParseError(rules.price_per_unit.message, "invalid_price")

        return Ingredient(
            name=name,
            quantity=quantity,
            unit=unit,
            price_per_unit=price_per_unit,
        )

    def parse_ingredients(self, texts: Iterable[str]) -> set[Ingredient]:
        return {self.parse_ingredient(text) for text in texts}

    # ── Filters and ordering ─────────────────────────────────────────

    def parse_price_filter(self, text: str) -> PriceCondition:
        """Parse ``"< 10"`` or ``"> 4.5"`` into a price condition."""
        tokens = text.strip().split()
        if len(tokens) != 2:
            raise ParseError(MESSAGE_WRONG_ARGUMENT_COUNT, "wrong_argument_count")
        symbol, raw_price = tokens

        if symbol not in (PriceSymbol.BELOW, PriceSymbol.ABOVE):
            raise ParseError(MESSAGE_UNRECOGNIZED_SYMBOL, "unrecognized_symbol")

        price = _parse_number(raw_price)
        if price is None:
            raise ParseError(MESSAGE_PRICE_NOT_NUMBER, "price_not_number")
        if price < 0:
            raise ParseError(MESSAGE_NEGATIVE_PRICE, "negative_price")

        return PriceCondition(symbol=symbol, price=price)

    def parse_sort_direction(self, text: str) -> bool:
        """Return True for ``asc`` and False for ``desc`` (exact, case-sensitive)."""
        trimmed = text.strip()
        if trimmed == SortOrder.ASC:
            return True
        if trimmed == SortOrder.DESC:
            return False
        raise ParseError(MESSAGE_INVALID_DIRECTION, "invalid_direction")

    # ── Helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _check_text(text: str, rule: Rule[str], code: str) -> str:
        trimmed = text.strip()
        if not rule.accepts(trimmed):
            raise ParseError(rule.message, code)
        return trimmed

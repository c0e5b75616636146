"""Content rules — the validity predicates behind every parsed field.

The parser never hard-codes what a valid title or quantity looks like.
It receives a :class:`RuleSet` and asks each :class:`Rule` whether a
candidate value is acceptable; on rejection the rule's ``message`` is
shown to the user as-is.  Tests and alternative front ends can supply
their own rule set without touching the value objects.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Self

# Letters and digits in any script; ``\w`` minus underscore.
_ALNUM = r"[^\W_]"
_LETTER = r"[^\W\d_]"

TITLE_PATTERN = re.compile(rf"{_ALNUM}(?:{_ALNUM}| )*")
NON_BLANK_PATTERN = re.compile(r"\S.*")
TAG_PATTERN = re.compile(rf"{_ALNUM}+")
INGREDIENT_NAME_PATTERN = TITLE_PATTERN
UNIT_PATTERN = re.compile(rf"{_LETTER}+")

DEFAULT_TITLE_MAX_LENGTH = 100
DEFAULT_TAG_MAX_LENGTH = 30
DEFAULT_MAX_QUANTITY = 10_000.0
DEFAULT_MAX_PRICE_PER_UNIT = 10_000.0


@dataclass(frozen=True)
class Rule[T]:
    """A named predicate plus the constraint message shown when it fails."""

    name: str
    message: str
    predicate: Callable[[T], bool]

    def accepts(self, value: T) -> bool:
        return bool(self.predicate(value))


def pattern_rule(
    name: str,
    message: str,
    pattern: re.Pattern[str],
    *,
    max_length: int | None = None,
) -> Rule[str]:
    """Build a text rule that requires a full *pattern* match and an optional length cap."""

    def check(text: str) -> bool:
        if max_length is not None and len(text) > max_length:
            return False
        return pattern.fullmatch(text) is not None

    return Rule(name=name, message=message, predicate=check)


def bounded_rule(
    name: str,
    message: str,
    *,
    minimum: float,
    maximum: float,
    inclusive_minimum: bool = True,
) -> Rule[float]:
    """Build a numeric rule for finite values within ``[minimum, maximum]``.

    With ``inclusive_minimum=False`` the lower bound itself is rejected.
    """

    def check(value: float) -> bool:
        if not math.isfinite(value):
            return False
        above = value >= minimum if inclusive_minimum else value > minimum
        return above and value <= maximum

    return Rule(name=name, message=message, predicate=check)


@dataclass(frozen=True)
class RuleSet:
    """Every rule the input parser consults, one per field kind."""

    title: Rule[str]
    description: Rule[str]
    step: Rule[str]
    tag: Rule[str]
    ingredient_name: Rule[str]
    quantity: Rule[float]
    unit: Rule[str]
    price_per_unit: Rule[float]

    @classmethod
    def default(
        cls,
        *,
        title_max_length: int = DEFAULT_TITLE_MAX_LENGTH,
        tag_max_length: int = DEFAULT_TAG_MAX_LENGTH,
        max_quantity: float = DEFAULT_MAX_QUANTITY,
        max_price_per_unit: float = DEFAULT_MAX_PRICE_PER_UNIT,
    ) -> Self:
        """Stock recipe rules, with limits taken from the ``[rules]`` config section."""
        return cls(
            title=pattern_rule(
                "title",
                "Titles should only contain letters, digits and spaces, should not be blank, "
                f"and should be at most {title_max_length} characters long.",
                TITLE_PATTERN,
                max_length=title_max_length,
            ),
            description=pattern_rule(
                "description",
                "Descriptions can take any values, and should not be blank.",
                NON_BLANK_PATTERN,
            ),
            step=pattern_rule(
                "step",
                "Steps can take any values, and should not be blank.",
                NON_BLANK_PATTERN,
            ),
            tag=pattern_rule(
                "tag",
                "Tags should be a single word of letters and digits, "
                f"at most {tag_max_length} characters long.",
                TAG_PATTERN,
                max_length=tag_max_length,
            ),
            ingredient_name=pattern_rule(
                "ingredient_name",
                "Ingredient names should only contain letters, digits and spaces, "
                "and should not be blank.",
                INGREDIENT_NAME_PATTERN,
            ),
            quantity=bounded_rule(
                "quantity",
                f"Quantity should be a number greater than 0 and at most {max_quantity:g}.",
                minimum=0.0,
                maximum=max_quantity,
                inclusive_minimum=False,
            ),
            unit=pattern_rule(
                "unit",
                "Units of measurement should be a single word of letters.",
                UNIT_PATTERN,
            ),
            price_per_unit=bounded_rule(
                "price_per_unit",
                f"Price per unit should be a number from 0 to {max_price_per_unit:g}.",
                minimum=0.0,
                maximum=max_price_per_unit,
            ),
        )

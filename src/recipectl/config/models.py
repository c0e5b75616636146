"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, recipectl.toml only contains
overrides.  No config file at all is a valid setup.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, PositiveFloat, PositiveInt

from recipectl.domain.rules import (
    DEFAULT_MAX_PRICE_PER_UNIT,
    DEFAULT_MAX_QUANTITY,
    DEFAULT_TAG_MAX_LENGTH,
    DEFAULT_TITLE_MAX_LENGTH,
)

# --- recipectl.toml sections ---


class RulesConfig(BaseModel):
    """[rules] section — limits fed into the default RuleSet."""

    model_config = {"frozen": True}

    title_max_length: PositiveInt = DEFAULT_TITLE_MAX_LENGTH
    tag_max_length: PositiveInt = DEFAULT_TAG_MAX_LENGTH
    max_quantity: PositiveFloat = DEFAULT_MAX_QUANTITY
    max_price_per_unit: PositiveFloat = DEFAULT_MAX_PRICE_PER_UNIT

    def rule_limits(self) -> dict[str, Any]:
        """Keyword arguments for :meth:`RuleSet.default`."""
        return self.model_dump()


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: PositiveInt = 120

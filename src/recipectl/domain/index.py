"""Index value object and integer-string checks.

Users refer to list positions one-based ("recipe 1" is the first);
storage layers work zero-based.  ``Index`` carries the zero-based value
and converts on the way in and out so neither side does arithmetic.

INVARIANT: An Index never points before the first element.
"""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, Field

_NON_ZERO_UNSIGNED = re.compile(r"[1-9][0-9]*")


def is_non_zero_unsigned_integer(text: str) -> bool:
    """Check whether *text* is a positive integer written without sign or leading zeros.

    Examples:
        >>> is_non_zero_unsigned_integer("12")
        True
        >>> is_non_zero_unsigned_integer("012")
        False
        >>> is_non_zero_unsigned_integer("+1")
        False
    """
    return _NON_ZERO_UNSIGNED.fullmatch(text) is not None


class Index(BaseModel):
    """A position in a displayed list."""

    model_config = {"frozen": True}

    zero_based: int = Field(ge=0)

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Self:
        return cls(zero_based=zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> Self:
        return cls(zero_based=one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)

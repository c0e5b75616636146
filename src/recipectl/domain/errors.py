"""ParseError — the single failure kind raised by the input parser.

Every failure carries a human-readable message (shown verbatim to the
user) and a stable ``code`` naming the sub-case.  Callers branch on
``code`` if they need to; the class hierarchy stays flat.
"""

from __future__ import annotations

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_WRONG_ARGUMENT_COUNT = "Incorrect number of arguments."
MESSAGE_INGREDIENT_WRONG_ARGUMENTS = (
    "Ingredient must have exactly 4 comma-separated fields: "
    "name, quantity, unit, price per unit."
)
MESSAGE_QUANTITY_NOT_NUMBER = "Quantity is not a valid number."
MESSAGE_PRICE_PER_UNIT_NOT_NUMBER = "Price per unit is not a valid number."
MESSAGE_UNRECOGNIZED_SYMBOL = "Filter symbol is not recognizable. Use '<' or '>'."
MESSAGE_PRICE_NOT_NUMBER = "Price is not a valid positive number."
MESSAGE_NEGATIVE_PRICE = "Price cannot be less than 0."
MESSAGE_INVALID_DIRECTION = "Neither ascending nor descending order. Use 'asc' or 'desc'."


class ParseError(Exception):
    """Raised when raw input cannot become a valid value object.

    Attributes:
        message: User-facing description of the violated constraint.
        code: Machine-readable sub-case, e.g. ``"invalid_index"``.
    """

    def __init__(self, message: str, code: str = "parse_error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"ParseError({self.message!r}, code={self.code!r})"

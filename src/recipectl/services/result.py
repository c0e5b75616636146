"""ServiceResult and ServiceError — the success/failure contract.

INVARIANT: Every ParseService method returns a ServiceResult and never
raises ParseError.  The CLI and any other front end consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Failure payload: stable code, user-facing message, extra context."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Tagged result of one parse operation.

    Attributes:
        ok: Whether the input parsed successfully.
        op: Name of the operation (e.g. ``"parse_ingredients"``).
        data: JSON-ready parsed values on success.
        warnings: Non-fatal observations (e.g. collapsed duplicates).
        error: Structured error if ``ok`` is False.
        meta: Input bookkeeping; collection operations record
            ``input_count``, the number of raw entries given.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

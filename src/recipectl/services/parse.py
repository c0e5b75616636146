"""ParseService — InputParser operations wrapped in ServiceResult.

The parser raises :class:`ParseError`; this service is the one place
that catches it and turns it into a failed result, so front ends only
ever branch on ``result.ok``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from recipectl.domain.errors import ParseError
from recipectl.domain.index import Index
from recipectl.domain.parser import InputParser
from recipectl.domain.recipe import Description, SortOrder, Title, total_cost
from recipectl.services.contracts import (
    IndicesResultData,
    IngredientsResultData,
    PriceFilterResultData,
    SortDirectionResultData,
    TextListResultData,
    TextResultData,
    dump_validated,
)
from recipectl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class ParseService:
    """Parse raw input and report the outcome as a ServiceResult.

    Usage::

        svc = ParseService(InputParser(RuleSet.default()))
        result = svc.ingredients(["Salt, 2.5, tsp, 0.10"])
        if result.ok:
            print(result.data["total_cost"])
    """

    def __init__(self, parser: InputParser | None = None) -> None:
        self._parser = parser or InputParser()

    @property
    def parser(self) -> InputParser:
        return self._parser

    # ── Operations ───────────────────────────────────────────────────

    def index(self, text: str) -> ServiceResult:
        return self._run(
            "parse_index",
            text,
            lambda: self._index_payload([self._parser.parse_index(text)]),
        )

    def indices(self, text: str) -> ServiceResult:
        return self._run(
            "parse_indices",
            text,
            lambda: self._index_payload(self._parser.parse_indices(text)),
        )

    def title(self, text: str) -> ServiceResult:
        return self._run(
            "parse_title",
            text,
            lambda: self._text_payload(self._parser.parse_title(text)),
        )

    def description(self, text: str) -> ServiceResult:
        return self._run(
            "parse_description",
            text,
            lambda: self._text_payload(self._parser.parse_description(text)),
        )

    def steps(self, texts: Sequence[str]) -> ServiceResult:
        def build() -> tuple[dict[str, Any], list[str]]:
            steps = self._parser.parse_steps(texts)
            items = [
                {"position": pos, "value": step.value, "canonical": str(step)}
                for pos, step in enumerate(steps, start=1)
            ]
            return dump_validated(TextListResultData, {"count": len(items), "items": items}), []

        return self._run("parse_steps", list(texts), build, meta={"input_count": len(texts)})

    def tags(self, texts: Sequence[str]) -> ServiceResult:
        def build() -> tuple[dict[str, Any], list[str]]:
            tags = sorted(self._parser.parse_tags(texts), key=lambda t: t.value)
            items = [
                {"position": pos, "value": tag.value, "canonical": str(tag)}
                for pos, tag in enumerate(tags, start=1)
            ]
            data = dump_validated(TextListResultData, {"count": len(items), "items": items})
            return data, _duplicate_warnings("tag", len(texts), len(items))

        return self._run("parse_tags", list(texts), build, meta={"input_count": len(texts)})

    def ingredients(self, texts: Sequence[str]) -> ServiceResult:
        def build() -> tuple[dict[str, Any], list[str]]:
            parsed = sorted(self._parser.parse_ingredients(texts), key=str)
            items = [
                {
                    "name": i.name,
                    "quantity": i.quantity,
                    "unit": i.unit,
                    "price_per_unit": i.price_per_unit,
                    "cost": i.cost,
                    "canonical": str(i),
                }
                for i in parsed
            ]
            data = dump_validated(
                IngredientsResultData,
                {"count": len(items), "items": items, "total_cost": total_cost(parsed)},
            )
            return data, _duplicate_warnings("ingredient", len(texts), len(items))

        return self._run(
            "parse_ingredients", list(texts), build, meta={"input_count": len(texts)}
        )

    def price_filter(self, text: str, *, check_price: float | None = None) -> ServiceResult:
        """Parse a price filter, optionally testing it against *check_price*."""

        def build() -> tuple[dict[str, Any], list[str]]:
            condition = self._parser.parse_price_filter(text)
            payload: dict[str, Any] = {
                "symbol": condition.symbol,
                "price": condition.price,
                "canonical": str(condition),
            }
            if check_price is not None:
                payload["checked_price"] = check_price
                payload["matches"] = condition.matches(check_price)
            return dump_validated(PriceFilterResultData, payload), []

        return self._run("parse_price_filter", text, build)

    def sort_direction(self, text: str) -> ServiceResult:
        def build() -> tuple[dict[str, Any], list[str]]:
            ascending = self._parser.parse_sort_direction(text)
            order = SortOrder.ASC if ascending else SortOrder.DESC
            payload = {"ascending": ascending, "canonical": str(order)}
            return dump_validated(SortDirectionResultData, payload), []

        return self._run("parse_sort_direction", text, build)

    # ── Helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _index_payload(indices: list[Index]) -> tuple[dict[str, Any], list[str]]:
        items = [
            {"one_based": i.one_based, "zero_based": i.zero_based, "canonical": str(i)}
            for i in indices
        ]
        return dump_validated(IndicesResultData, {"count": len(items), "items": items}), []

    @staticmethod
    def _text_payload(value: Title | Description) -> tuple[dict[str, Any], list[str]]:
        payload = {"value": value.value, "canonical": str(value)}
        return dump_validated(TextResultData, payload), []

    @staticmethod
    def _run(
        op: str,
        raw: str | list[str],
        build: Callable[[], tuple[dict[str, Any], list[str]]],
        *,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        try:
            data, warnings = build()
        except ParseError as exc:
            logger.debug("%s rejected input %r: %s", op, raw, exc.message)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=exc.message, detail={"input": raw}),
                meta=meta,
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings, meta=meta)


def _duplicate_warnings(kind: str, given: int, kept: int) -> list[str]:
    collapsed = given - kept
    if collapsed <= 0:
        return []
    noun = kind if collapsed == 1 else f"{kind}s"
    return [f"{collapsed} duplicate {noun} collapsed"]

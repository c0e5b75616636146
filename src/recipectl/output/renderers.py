"""Operation-specific Rich renderers for parse results.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from recipectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from recipectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render canonical values only, one per line, for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("canonical", "")) for item in items)
    if "canonical" in result.data:
        return str(result.data["canonical"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="recipe.ok"), Text(f"  {result.op}", style="recipe.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="recipe.key")
    style = "recipe.number" if isinstance(value, (int, float)) else "recipe.value"
    console.print(k, Text(str(value), style=style), sep="")


def _number(value: float) -> str:
    return f"{value:g}"


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="recipe.error")
    op = Text(f"  {result.op}", style="recipe.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="recipe.code"))
        for k, v in err.detail.items():
            console.print(Text(f"  {k}: {v!r}"))


# ── Per-operation renderers ───────────────────────────────────────────


def _render_indices(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data["items"]
    if len(items) == 1 and not verbose:
        _field(console, "index", items[0]["one_based"])
        return
    table = Table(show_header=True, pad_edge=False)
    table.add_column("Index", style="recipe.number", justify="right")
    if verbose:
        table.add_column("Zero-based", style="dim", justify="right")
    for item in items:
        row = [str(item["one_based"])]
        if verbose:
            row.append(str(item["zero_based"]))
        table.add_row(*row)
    console.print(table)


def _render_text(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "value", result.data["value"])


def _render_text_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    label = "Step" if result.op == "parse_steps" else "Tag"
    table = Table(show_header=True, pad_edge=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column(label, style="recipe.value")
    for item in result.data["items"]:
        table.add_row(str(item["position"]), Text(item["value"]))
    console.print(table)


def _render_ingredients(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, pad_edge=False)
    table.add_column("Name", style="recipe.value")
    table.add_column("Quantity", justify="right")
    table.add_column("Unit")
    table.add_column("Price/unit", justify="right")
    table.add_column("Cost", style="recipe.number", justify="right")
    for item in result.data["items"]:
        table.add_row(
            Text(item["name"]),
            _number(item["quantity"]),
            Text(item["unit"]),
            f"{item['price_per_unit']:.2f}",
            f"{item['cost']:.2f}",
        )
    console.print(table)
    _field(console, "total_cost", f"{result.data['total_cost']:.2f}")


def _render_price_filter(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "condition", f"price {data['symbol']} {_number(data['price'])}")
    if data.get("matches") is not None:
        _field(console, "checked_price", _number(data["checked_price"]))
        _field(console, "matches", "yes" if data["matches"] else "no")


def _render_sort_direction(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _field(console, "order", "ascending" if result.data["ascending"] else "descending")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "parse_index": _render_indices,
    "parse_indices": _render_indices,
    "parse_title": _render_text,
    "parse_description": _render_text,
    "parse_steps": _render_text_list,
    "parse_tags": _render_text_list,
    "parse_ingredients": _render_ingredients,
    "parse_price_filter": _render_price_filter,
    "parse_sort_direction": _render_sort_direction,
}

"""Command group: parse raw recipe input from the shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recipectl.commands._base import RecipeGroup

if TYPE_CHECKING:
    from recipectl.commands._context import AppContext

_PARSE_EXAMPLES = """\
  recipectl parse index 2
  recipectl parse indices "1,3,4"
  recipectl parse ingredients "Salt, 2.5, tsp, 0.10" "Flour, 500, g, 0.002"
  recipectl parse price-filter "< 10" --price 7.5
  recipectl --json parse tags vegan quick vegan"""


@click.group(cls=RecipeGroup, examples=_PARSE_EXAMPLES)
def parse() -> None:
    """Parse typed input into recipe values and report what it became."""


@parse.command(
    examples="""\
  recipectl --quiet parse index " 12 "
  recipectl parse index 1"""
)
@click.argument("text")
@click.pass_obj
def index(app: AppContext, text: str) -> None:
    """Parse a one-based list index."""
    app.emit(app.service.index(text))


@parse.command(
    examples="""\
  recipectl --json parse indices "4, 2"
  recipectl parse indices 1,2,3"""
)
@click.argument("text")
@click.pass_obj
def indices(app: AppContext, text: str) -> None:
    """Parse comma-separated one-based indices."""
    app.emit(app.service.indices(text))


@parse.command(examples='  recipectl parse title "Chicken Rice"')
@click.argument("text")
@click.pass_obj
def title(app: AppContext, text: str) -> None:
    """Parse a recipe title."""
    app.emit(app.service.title(text))


@parse.command(examples='  recipectl parse description "Hainanese style, serves four."')
@click.argument("text")
@click.pass_obj
def description(app: AppContext, text: str) -> None:
    """Parse a recipe description."""
    app.emit(app.service.description(text))


@parse.command(examples='  recipectl parse steps "Boil water" "Add rice" "Simmer 15 min"')
@click.argument("texts", nargs=-1, required=True)
@click.pass_obj
def steps(app: AppContext, texts: tuple[str, ...]) -> None:
    """Parse preparation steps, keeping their order."""
    app.emit(app.service.steps(list(texts)))


@parse.command(examples="  recipectl parse tags dinner quick dinner")
@click.argument("texts", nargs=-1, required=True)
@click.pass_obj
def tags(app: AppContext, texts: tuple[str, ...]) -> None:
    """Parse tags; repeated tags are collapsed."""
    app.emit(app.service.tags(list(texts)))


@parse.command(
    examples=(
        '  recipectl --quiet parse ingredients "Salt, 2.5, tsp, 0.10"\n'
        '  recipectl parse ingredients "Rice, 200, g, 0.01" "Chicken, 1, kg, 8.50"'
    )
)
@click.argument("texts", nargs=-1, required=True)
@click.pass_obj
def ingredients(app: AppContext, texts: tuple[str, ...]) -> None:
    """Parse ingredients given as "name, quantity, unit, price per unit"."""
    app.emit(app.service.ingredients(list(texts)))


@parse.command(
    "price-filter",
    examples="""\
  recipectl parse price-filter "< 10"
  recipectl parse price-filter "> 4.5" --price 6""",
)
@click.argument("text")
@click.option("--price", type=float, default=None, help="Also test this recipe price.")
@click.pass_obj
def price_filter(app: AppContext, text: str, price: float | None) -> None:
    """Parse a price filter such as "< 10"."""
    app.emit(app.service.price_filter(text, check_price=price))


@parse.command(examples="  recipectl parse sort desc")
@click.argument("text")
@click.pass_obj
def sort(app: AppContext, text: str) -> None:
    """Parse a sort order: asc or desc."""
    app.emit(app.service.sort_direction(text))

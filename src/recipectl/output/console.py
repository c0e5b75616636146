"""Rich Console factory and theme for recipectl output.

Consoles render into a StringIO buffer so renderers can return plain
strings.  In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RECIPE_THEME = Theme(
    {
        "recipe.ok": "bold green",
        "recipe.error": "bold red",
        "recipe.warning": "bold yellow",
        "recipe.op": "bold cyan",
        "recipe.key": "dim",
        "recipe.value": "bold",
        "recipe.number": "magenta",
        "recipe.code": "dim red",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (``[output] width`` in config).
    """
    return Console(
        file=StringIO(),
        theme=RECIPE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

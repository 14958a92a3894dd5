"""Rich theme and text capture for countryctl's human output.

Renderers draw onto a throwaway Console and hand back plain text, so the
CLI decides where it goes (stdout for results, stderr for errors).
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

COUNTRY_THEME = Theme(
    {
        "cc.ok": "bold green",
        "cc.error": "bold red",
        "cc.op": "bold cyan",
        "cc.key": "dim",
        "cc.city": "bold blue",
        "cc.point": "magenta",
        "cc.count": "green",
        "cc.distance": "yellow",
    }
)


def render_text(
    draw: Callable[[Console], None],
    *,
    width: int | None = None,
    no_color: bool = False,
) -> str:
    """Run *draw* against an in-memory Console and return what it printed.

    The buffer is never a terminal, so the text carries no ANSI codes
    unless Rich is forced into color by the environment.
    """
    buffer = StringIO()
    draw(
        Console(
            file=buffer,
            theme=COUNTRY_THEME,
            no_color=no_color,
            highlight=False,
            width=width or DEFAULT_WIDTH,
        )
    )
    return buffer.getvalue().rstrip("\n")


def format_point(value: list[float] | tuple[float, float]) -> str:
    """Render an ``[x, y]`` payload the same way :class:`Point` prints."""
    x, y = value
    return f"({x},{y})"

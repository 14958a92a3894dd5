"""Human-readable rendering of country and city results.

One city becomes a panel, a list of cities becomes a table, and scalar
answers (residents, distances) are printed as key-value lines.  The
renderer is picked from ``result.op``; anything unlisted gets the
key-value form.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from countryctl.output.console import format_point, render_text

if TYPE_CHECKING:
    from rich.console import Console

    from countryctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    no_color: bool = False,
) -> str:
    """Render *result* with the renderer registered for its op (errors share one)."""
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
    else:
        renderer = _render_error
    return render_text(
        lambda console: renderer(result, console, verbose=verbose),
        width=width,
        no_color=no_color,
    )


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    names = result.city_names
    if names or "items" in result.data:
        return "\n".join(names)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="cc.ok")
    op = Text(f"  {result.op}", style="cc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="cc.key")
    if key in ("name", "reference", "country"):
        v = Text(str(value), style="cc.city")
    elif key in ("center", "station") and isinstance(value, (list, tuple)):
        v = Text(format_point(value), style="cc.point")
    elif key in ("distance", "center_to_station"):
        v = Text(f"{value:.2f}" if isinstance(value, float) else str(value), style="cc.distance")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _city_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table for a list of city payloads."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cc.city")
    table.add_column("Center", style="cc.point")
    table.add_column("Station", style="cc.point")
    table.add_column("Residents", justify="right", style="cc.count")
    table.add_column("Neighborhoods", justify="right")

    for i, item in enumerate(items, start=1):
        table.add_row(
            str(i),
            str(item.get("name", "")),
            format_point(item.get("center", ("?", "?"))),
            format_point(item.get("station", ("?", "?"))),
            str(item.get("residents", "")),
            str(item.get("neighborhoods", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cc.error")
    op = Text(f"  {result.op}", style="cc.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── City renderers ────────────────────────────────────────────────────


def _render_city(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single city as a panel."""
    d = result.data
    lines = [
        f"center: {format_point(d['center'])}",
        f"station: {format_point(d['station'])}",
        f"residents: {d['residents']}",
        f"neighborhoods: {d['neighborhoods']}",
    ]
    if "center_to_station" in d:
        lines.append(f"center to station: {d['center_to_station']:.2f}")
    if "added" in d:
        lines.append(f"added: {d['added']}")
    _status_line(console, result)
    panel = Panel(
        Text("\n".join(lines)),
        title=Text(str(d["name"])),
        border_style="cc.city",
        expand=False,
    )
    console.print(panel)
    if verbose:
        _render_meta(console, result)


def _render_city_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_cities / cities_north_of results as a table."""
    items = result.data.get("items", [])
    if result.op == "cities_north_of":
        console.print(Text(f"Cities north of {result.data.get('reference', '?')}", style="bold"))
    elif "country" in result.data:
        console.print(Text(f"Cities of {result.data['country']}", style="bold"))
    if items:
        console.print(_city_table(items))
    count = result.data.get("count", len(items))
    console.print(f"\n{count} {'city' if count == 1 else 'cities'}")
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, dict) or (
            isinstance(value, list) and key not in ("center", "station")
        ):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Management
    "add_city": _render_city,
    "show_city": _render_city,
    "unify_cities": _render_city,
    "derive_city": _render_city,
    "add_residents": _render_city,
    "move_station": _render_city,
    # Queries
    "list_cities": _render_city_table,
    "cities_north_of": _render_city_table,
    "southernmost_city": _render_city,
    "total_residents": _render_generic,
    "longest_distance": _render_generic,
}

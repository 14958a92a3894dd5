"""Command group: single-city operations.

The atlas file is never rewritten; mutations report the resulting city.
Negative numbers must follow ``--`` so Click does not read them as options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from countryctl.commands._base import CountryGroup

if TYPE_CHECKING:
    from countryctl.commands._context import AppContext


class Coordinate(click.ParamType):
    """A map coordinate or offset; integral input stays an int."""

    name = "number"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> int | float:
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


COORDINATE = Coordinate()

_CITY_EXAMPLES = """\
  countryctl city add Akko 1 10 1 9 --residents 50000
  countryctl city show Haifa
  countryctl city add-residents Haifa 5000
  countryctl city move-station Haifa -- -1 2
  countryctl city derive Haifa "Haifa Bay" 3 0 --add"""


@click.group(cls=CountryGroup, examples=_CITY_EXAMPLES)
def city() -> None:
    """Inspect and adjust individual cities."""


@city.command(
    examples="""\
  countryctl city add Akko 1 10 1 9
  countryctl city add Akko 1 10 1 9 --residents 50000 --neighborhoods 12
  countryctl --json city add Yeruham -- 3 -20 3 -21""",
)
@click.argument("name")
@click.argument("center_x", type=COORDINATE)
@click.argument("center_y", type=COORDINATE)
@click.argument("station_x", type=COORDINATE)
@click.argument("station_y", type=COORDINATE)
@click.option("--residents", type=int, default=0, show_default=True)
@click.option("--neighborhoods", type=int, default=1, show_default=True)
@click.pass_obj
def add(
    app: AppContext,
    name: str,
    center_x: int | float,
    center_y: int | float,
    station_x: int | float,
    station_y: int | float,
    residents: int,
    neighborhoods: int,
) -> None:
    """Add NAME with its center and central station to the country."""
    app.emit(
        app.service.add_city(
            name, (center_x, center_y), (station_x, station_y), residents, neighborhoods
        )
    )


@city.command(examples="  countryctl city show Haifa")
@click.argument("name")
@click.pass_obj
def show(app: AppContext, name: str) -> None:
    """Show one city, including its center-to-station distance."""
    app.emit(app.service.show_city(name))


@city.command(
    "add-residents",
    examples="""\
  countryctl city add-residents Haifa 5000
  countryctl city add-residents Haifa -- -200""",
)
@click.argument("name")
@click.argument("delta", type=int)
@click.pass_obj
def add_residents(app: AppContext, name: str, delta: int) -> None:
    """Add DELTA residents to NAME (negative DELTA removes them)."""
    app.emit(app.service.add_residents(name, delta))


@city.command(
    "move-station",
    examples="  countryctl city move-station Haifa -- -1 2",
)
@click.argument("name")
@click.argument("dx", type=COORDINATE)
@click.argument("dy", type=COORDINATE)
@click.pass_obj
def move_station(app: AppContext, name: str, dx: float, dy: float) -> None:
    """Shift NAME's central station by (DX, DY)."""
    app.emit(app.service.move_station(name, dx, dy))


@city.command(
    examples="""\
  countryctl city derive Haifa "Haifa Bay" 3 0
  countryctl city derive Haifa "Haifa Bay" 3 0 --add""",
)
@click.argument("source")
@click.argument("new_name")
@click.argument("dx", type=COORDINATE)
@click.argument("dy", type=COORDINATE)
@click.option("--add", is_flag=True, help="Also add the new city to the country.")
@click.pass_obj
def derive(app: AppContext, source: str, new_name: str, dx: float, dy: float, add: bool) -> None:
    """Found NEW_NAME at SOURCE's location shifted by (DX, DY)."""
    app.emit(app.service.derive_city(source, new_name, dx, dy, add=add))

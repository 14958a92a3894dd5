"""Commands: country-wide queries and the unify merge."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from countryctl.commands._base import CountryCommand

if TYPE_CHECKING:
    from countryctl.commands._context import AppContext


@click.command(
    cls=CountryCommand,
    examples="""\
  countryctl show
  countryctl show --plain
  countryctl --json show""",
)
@click.option("--plain", is_flag=True, help="Print the country as plain text instead of a table.")
@click.pass_obj
def show(app: AppContext, plain: bool) -> None:
    """List every city in the country."""
    app.emit(app.service.list_cities(), text_key="text" if plain else None)


@click.command(
    cls=CountryCommand,
    examples="""\
  countryctl residents
  countryctl -q residents""",
)
@click.pass_obj
def residents(app: AppContext) -> None:
    """Total residents across all cities."""
    app.emit(app.service.total_residents())


@click.command(
    cls=CountryCommand,
    examples="""\
  countryctl longest
  countryctl longest --exhaustive""",
)
@click.option(
    "--exhaustive",
    is_flag=True,
    help="Compare every pair of cities instead of the two-pointer scan.",
)
@click.pass_obj
def longest(app: AppContext, exhaustive: bool) -> None:
    """Longest distance between two city centers."""
    app.emit(app.service.longest_distance(exhaustive=exhaustive))


@click.command(
    cls=CountryCommand,
    examples="""\
  countryctl north Haifa
  countryctl north "Beer Sheva" --table
  countryctl --json north Haifa""",
)
@click.argument("name")
@click.option("--table", is_flag=True, help="Render matches as a table.")
@click.pass_obj
def north(app: AppContext, name: str, table: bool) -> None:
    """Cities whose center lies north of NAME."""
    app.emit(app.service.cities_north_of(name), text_key=None if table else "text")


@click.command(cls=CountryCommand, examples="  countryctl south")
@click.pass_obj
def south(app: AppContext) -> None:
    """The southernmost city."""
    app.emit(app.service.southernmost_city())


@click.command(
    cls=CountryCommand,
    examples="""\
  countryctl unify Haifa Akko
  countryctl --json unify "Tel Aviv" Yafo""",
)
@click.argument("name1")
@click.argument("name2")
@click.pass_obj
def unify(app: AppContext, name1: str, name2: str) -> None:
    """Merge NAME1 and NAME2 into a single city named NAME1-NAME2."""
    app.emit(app.service.unify_cities(name1, name2))

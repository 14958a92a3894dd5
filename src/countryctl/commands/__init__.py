"""Subcommand modules for countryctl.

Provides register_commands() which uses deferred imports to keep
``countryctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``city`` group and the country-level commands on the root group."""
    # --- Groups ---
    from countryctl.commands.city import city

    cli.add_command(city)

    # --- Standalone commands ---
    from countryctl.commands.country import longest, north, residents, show, south, unify

    cli.add_command(show)
    cli.add_command(residents)
    cli.add_command(longest)
    cli.add_command(north)
    cli.add_command(south)
    cli.add_command(unify)

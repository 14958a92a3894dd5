"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Country loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from countryctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from countryctl.config.settings import CountrySettings
    from countryctl.domain.country import Country
    from countryctl.services.country import CountryService
    from countryctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The country is built
    from the atlas config on first use so ``--help`` and ``--version``
    never touch it.
    """

    def __init__(self, settings: CountrySettings) -> None:
        self.settings = settings
        self._country: Country | None = None

        from countryctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def country(self) -> Country:
        """The loaded country (built lazily on first access)."""
        if self._country is None:
            from countryctl.config.atlas import build_country

            self._country = build_country(self.settings.country, self.settings.cities)
        return self._country

    @property
    def service(self) -> CountryService:
        from countryctl.services.country import CountryService

        return CountryService(self.country)

    def emit(self, result: ServiceResult, *, text_key: str | None = None) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
            no_color=not self.settings.output.color,
        )
        output = format_result(result, settings=settings, text_key=text_key)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

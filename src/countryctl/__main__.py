from countryctl.cli import cli

cli()

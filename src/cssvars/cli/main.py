"""cssvars CLI entry point: Click group with subcommands."""

import logging

import click

from cssvars import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssvars")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """cssvars - list and edit CSS custom properties without reformatting."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from cssvars.cli.edit import diff, set_values  # noqa: E402
from cssvars.cli.listing import list_declarations  # noqa: E402

cli.add_command(list_declarations)
cli.add_command(set_values)
cli.add_command(diff)


def main() -> None:
    cli()

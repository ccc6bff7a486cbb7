"""CLI command: cssvars list -- show the custom properties in a stylesheet."""

from __future__ import annotations

import click

from cssvars.cli.files import read_stylesheet
from cssvars.serialization import to_json
from cssvars.session import EditSession


@click.command(name="list")
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--filter", "term", default="", help="Only names or selectors containing TERM.")
@click.option("--json", "as_json", is_flag=True, help="Print declarations as JSON.")
def list_declarations(cssfile: str, term: str, as_json: bool) -> None:
    """List every custom-property declaration in CSSFILE.

    Each line shows the value position, the enclosing selector and the
    declaration with its value trimmed for display.
    """
    source = read_stylesheet(cssfile)
    session = EditSession(source, source_file=cssfile)
    declarations = session.filter(term)

    if as_json:
        click.echo(to_json(declarations, indent=2))
        return

    if not declarations:
        click.echo("No custom properties found.")
        return

    for declaration in declarations:
        location = declaration.location(source)
        click.echo(
            f"{location.lineno}:{location.col_offset}  {declaration.selector}  "
            f"{declaration.name}: {declaration.value.strip()}"
        )

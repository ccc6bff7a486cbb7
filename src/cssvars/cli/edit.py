"""CLI commands: cssvars set / cssvars diff -- apply edits by property name."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssvars.cli.files import read_stylesheet, write_stylesheet
from cssvars.errors import EditsFileError
from cssvars.scanner import is_custom_property_name
from cssvars.serialization import load_edits
from cssvars.session import EditSession


def _normalize_name(name: str) -> str:
    name = name.strip()
    return name if name.startswith("--") else f"--{name}"


def _parse_assignments(assignments: tuple[str, ...]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` pairs; NAME may omit the leading ``--``."""
    edits: dict[str, str] = {}
    for item in assignments:
        name, sep, value = item.partition("=")
        name = _normalize_name(name)
        if not sep or not is_custom_property_name(name):
            raise click.BadParameter(
                f"expected NAME=VALUE, got {item!r}", param_hint="'--set'"
            )
        edits[name] = value
    return edits


def _keep_padding(original: str, value: str) -> str:
    """Wrap value in the whitespace that surrounded the original value."""
    stripped = original.strip()
    if not stripped:
        return value
    leading = original[: original.index(stripped)]
    trailing = original[len(leading) + len(stripped) :]
    return f"{leading}{value.strip()}{trailing}"


def _read_edits(edits_file: str) -> dict[str, str]:
    try:
        text = Path(edits_file).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise EditsFileError(f"Not valid UTF-8: {exc.reason}", edits_file) from exc
    except OSError as exc:
        raise EditsFileError(f"Cannot read file: {exc.strerror or exc}", edits_file) from exc
    return load_edits(text, source_file=edits_file)


def _build_session(
    cssfile: str,
    assignments: tuple[str, ...],
    edits_file: str | None,
    selector: str | None,
    raw: bool,
) -> EditSession:
    """Load the stylesheet and apply every requested edit to a session."""
    edits: dict[str, str] = {}
    if edits_file is not None:
        try:
            loaded = _read_edits(edits_file)
        except EditsFileError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
        edits.update({_normalize_name(k): v for k, v in loaded.items()})
    edits.update(_parse_assignments(assignments))

    if not edits:
        raise click.UsageError("Nothing to apply: pass --set NAME=VALUE or --edits FILE.")

    session = EditSession(read_stylesheet(cssfile), source_file=cssfile)
    for name, value in edits.items():
        matched = 0
        for declaration in session.declarations:
            if declaration.name != name:
                continue
            if selector is not None and declaration.selector != selector:
                continue
            new_value = value if raw else _keep_padding(declaration.value, value)
            session.set(declaration.id, new_value)
            matched += 1
        if not matched:
            click.echo(f"Warning: no declaration named {name} in {cssfile}", err=True)
    return session


def _edit_options(command):  # type: ignore[no-untyped-def]
    """Options shared by set and diff."""
    options = [
        click.argument("cssfile", type=click.Path(exists=True, dir_okay=False)),
        click.option(
            "--set",
            "assignments",
            multiple=True,
            metavar="NAME=VALUE",
            help="New value for a custom property (repeatable).",
        ),
        click.option(
            "--edits",
            "edits_file",
            type=click.Path(exists=True, dir_okay=False),
            help="JSON object mapping property names to values.",
        ),
        click.option("--selector", default=None, help="Only edit declarations under SELECTOR."),
        click.option(
            "--raw", is_flag=True, help="Use values verbatim instead of keeping original padding."
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


@click.command(name="set")
@_edit_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the patched stylesheet here instead of stdout.",
)
def set_values(
    cssfile: str,
    assignments: tuple[str, ...],
    edits_file: str | None,
    selector: str | None,
    raw: bool,
    output: str | None,
) -> None:
    """Apply edits to CSSFILE and emit the patched stylesheet.

    Only the edited values change; everything else is copied verbatim.
    """
    session = _build_session(cssfile, assignments, edits_file, selector, raw)
    patched = session.render()

    if output is None:
        click.echo(patched, nl=False)
        return

    write_stylesheet(output, patched)
    click.echo(
        f"Wrote {Path(output).name} ({len(session.changes())} change(s))", err=True
    )


@click.command()
@_edit_options
def diff(
    cssfile: str,
    assignments: tuple[str, ...],
    edits_file: str | None,
    selector: str | None,
    raw: bool,
) -> None:
    """Show which declarations in CSSFILE the edits would change."""
    session = _build_session(cssfile, assignments, edits_file, selector, raw)
    changes = session.changes()

    if not changes:
        click.echo("No changes.")
        return

    for change in changes:
        click.echo(
            f"{change.selector}  {change.name}: "
            f"{change.old_value.strip()} -> {change.new_value.strip()}"
        )
    click.echo()
    click.echo(f"Summary: {len(changes)} change(s)")

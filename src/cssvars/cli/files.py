"""Stylesheet file helpers shared by CLI commands.

Files are read and written with newline translation disabled so that
``\\r\\n`` line endings survive a round trip.
"""

from __future__ import annotations

from pathlib import Path

import click


def read_stylesheet(path: str | Path) -> str:
    """Read a UTF-8 stylesheet.

    Raises:
        click.FileError: If the file cannot be read or is not UTF-8.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise click.FileError(str(path), hint=f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise click.FileError(str(path), hint=exc.strerror or str(exc)) from exc


def write_stylesheet(path: str | Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)

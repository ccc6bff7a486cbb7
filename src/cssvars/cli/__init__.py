"""Command line interface for cssvars."""

from cssvars.cli.main import cli, main

__all__ = ["cli", "main"]

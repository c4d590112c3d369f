"""Command line interface for groupwise."""

from groupwise.cli.main import cli, main

__all__ = ["cli", "main"]

"""obsidian-uri command-line interface."""

from obsidian_uri.cli.main import cli, main

__all__ = ["cli", "main"]

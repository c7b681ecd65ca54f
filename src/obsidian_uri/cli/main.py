"""obsidian-uri CLI — main entry point and shared utilities."""

from __future__ import annotations

import logging

import click
from rich.console import Console

console = Console()


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """obsidian-uri — build and open obsidian:// links."""
    setup_logging(verbose)


def cli():
    """Entrypoint that loads .env before running the CLI."""
    from dotenv import load_dotenv

    load_dotenv()
    main()


# Import subcommand modules to register commands
from obsidian_uri.cli.shortcut_commands import new, note, search  # noqa: E402
from obsidian_uri.cli.uri_commands import build, open_uri  # noqa: E402

main.add_command(build)
main.add_command(open_uri, name="open")
main.add_command(note)
main.add_command(search)
main.add_command(new)

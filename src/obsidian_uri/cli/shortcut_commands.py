"""Shortcuts for common Obsidian actions — obsidian-uri note/search/new."""

from __future__ import annotations

import click

from obsidian_uri.cli.uri_commands import build_uri, dispatch, dispatch_options


def _with_vault(vault: str | None, params: list[tuple[str, str]]) -> list[tuple[str, str]]:
    if vault is None:
        return params
    return [("vault", vault), *params]


@click.command()
@click.argument("file")
@click.option("--vault", default=None, help="Vault name")
@click.option("--line", type=int, default=None, help="Line to jump to")
@dispatch_options
def note(
    file: str,
    vault: str | None,
    line: int | None,
    wait: bool | None,
    quiet: bool,
    print_only: bool,
) -> None:
    """Open FILE in Obsidian."""
    params = [("file", file)]
    if line is not None:
        params.append(("line", str(line)))
    dispatch(build_uri("open", _with_vault(vault, params)), wait, quiet, print_only)


@click.command()
@click.argument("query")
@click.option("--vault", default=None, help="Vault name")
@dispatch_options
def search(
    query: str,
    vault: str | None,
    wait: bool | None,
    quiet: bool,
    print_only: bool,
) -> None:
    """Run a search for QUERY in Obsidian."""
    params = _with_vault(vault, [("query", query)])
    dispatch(build_uri("search", params), wait, quiet, print_only)


@click.command()
@click.argument("file")
@click.option("--vault", default=None, help="Vault name")
@click.option("--content", default=None, help="Initial note content")
@dispatch_options
def new(
    file: str,
    vault: str | None,
    content: str | None,
    wait: bool | None,
    quiet: bool,
    print_only: bool,
) -> None:
    """Create a new note FILE in Obsidian."""
    params = [("file", file)]
    if content is not None:
        params.append(("content", content))
    dispatch(build_uri("new", _with_vault(vault, params)), wait, quiet, print_only)

"""URI commands — obsidian-uri build, obsidian-uri open."""

from __future__ import annotations

import sys

import click
from rich.markup import escape

from obsidian_uri.cli.main import console
from obsidian_uri.core.config import LaunchConfig
from obsidian_uri.core.errors import ObsidianUriError, ParameterFormatError
from obsidian_uri.uri import ObsidianUri, parse_parameter


def _parse_parameters(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...],
) -> list[tuple[str, str]]:
    """Click callback: split each -p KEY=VALUE into a (key, value) pair."""
    pairs = []
    for text in value:
        try:
            pairs.append(parse_parameter(text))
        except ParameterFormatError as e:
            raise click.BadParameter(str(e)) from e
    return pairs


def parameter_option(fn):
    """Shared repeatable -p/--param KEY=VALUE option."""
    return click.option(
        "-p", "--param", "params",
        multiple=True,
        callback=_parse_parameters,
        metavar="KEY=VALUE",
        help="Query parameter (repeatable, order is kept)",
    )(fn)


def dispatch_options(fn):
    """Shared --wait/--no-wait, --quiet and --print options for dispatching commands."""
    fn = click.option(
        "--print", "print_only", is_flag=True,
        help="Print the URI instead of opening it",
    )(fn)
    fn = click.option(
        "-q", "--quiet", is_flag=True,
        help="Do not print the URI before opening it",
    )(fn)
    fn = click.option(
        "--wait/--no-wait", default=None,
        help="Wait for the handler to exit and check its status",
    )(fn)
    return fn


def build_uri(action: str, params: list[tuple[str, str]]) -> ObsidianUri:
    """Fold (key, value) pairs into a builder, keeping their order."""
    uri = ObsidianUri.action(action)
    for key, value in params:
        uri = uri.add_parameter(key, value)
    return uri


def dispatch(
    uri: ObsidianUri,
    wait: bool | None,
    quiet: bool,
    print_only: bool = False,
) -> None:
    """Open a built URI, reporting failure as exit status 1."""
    if print_only:
        click.echo(uri.build())
        return

    overrides = {}
    if wait is not None:
        overrides["wait"] = wait
    if quiet:
        overrides["echo"] = False
    try:
        config = LaunchConfig.from_dict(overrides)
        if config.echo:
            click.echo(uri.build())
        uri.open(config=config)
    except ObsidianUriError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


@click.command()
@click.argument("action")
@parameter_option
def build(action: str, params: list[tuple[str, str]]) -> None:
    """Print the obsidian:// URI for ACTION.

    Example:
        obsidian-uri build search -p query="meeting notes"
    """
    click.echo(build_uri(action, params).build())


@click.command("open")
@click.argument("action")
@parameter_option
@dispatch_options
def open_uri(
    action: str,
    params: list[tuple[str, str]],
    wait: bool | None,
    quiet: bool,
    print_only: bool,
) -> None:
    """Build the obsidian:// URI for ACTION and open it.

    Example:
        obsidian-uri open open -p vault=notes -p file=Inbox
    """
    dispatch(build_uri(action, params), wait, quiet, print_only)

"""Entry point: the ``timeparts`` command group and its global flags."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from timeparts import __version__
from timeparts.commands._context import AppContext
from timeparts.commands._examples import with_examples
from timeparts.commands.calendar import calendar
from timeparts.commands.formats import formats
from timeparts.commands.moments import format_cmd, now, parse
from timeparts.config.settings import TimepartsSettings

# Applied bottom-up, so listed in the order --help shows them.
GLOBAL_OPTIONS = (
    click.option("-c", "--config", "config_path", default=None, help="Read settings from this TOML file."),
    click.option("--json", "json_output", is_flag=True, help="Print results as JSON."),
    click.option("-q", "--quiet", is_flag=True, help="Print only the rendered value."),
    click.option("-v", "--verbose", is_flag=True, help="Print every field and debug logs."),
    click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines."),
)


def global_options(func: Callable[..., Any]) -> Callable[..., Any]:
    for option in reversed(GLOBAL_OPTIONS):
        func = option(func)
    return func


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="timeparts")
@with_examples(
    """
    timeparts now --format readable-date-time
    timeparts parse 13:52 --utc
    timeparts --json calendar month 2 --year 2024
    timeparts -c ./timeparts.toml formats"""
)
@global_options
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Calendar parts and moment formatting."""
    ctx.obj = AppContext(TimepartsSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for command in (now, parse, format_cmd, formats, calendar):
    cli.add_command(command)

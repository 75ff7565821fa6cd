"""Commands: now, parse, format — render moments with patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeparts.commands._examples import with_examples

if TYPE_CHECKING:
    from timeparts.commands._context import AppContext

_PATTERN_HELP = "Pattern or preset name (e.g. 'dd MMM yyyy', date-time)."


@click.command()
@with_examples(
    """
  timeparts now
  timeparts now --format "EEE, dd MMM yyyy HH:mm:ss"
  timeparts now --format iso8601-utc --utc
  timeparts -q now --format date"""
)
@click.option("-f", "--format", "pattern", default=None, help=_PATTERN_HELP)
@click.option("--utc/--local", "utc", default=None, help="Render in UTC or local time.")
@click.pass_obj
def now(app: AppContext, pattern: str | None, utc: bool | None) -> None:
    """Show the current moment."""
    app.emit(app.service.now(pattern=pattern, utc=utc))


@click.command()
@with_examples(
    """
  timeparts parse 2025-04-08T13:52:05Z
  timeparts parse "2025-04-08 13:52:05" --format readable-date-time
  timeparts parse 13:52:05
  timeparts --json parse 09:30:00.25"""
)
@click.argument("text")
@click.option("-f", "--format", "pattern", default=None, help=_PATTERN_HELP)
@click.option("--utc/--local", "utc", default=None, help="Render in UTC or local time.")
@click.pass_obj
def parse(app: AppContext, text: str, pattern: str | None, utc: bool | None) -> None:
    """Parse a timestamp or time of day (HH:mm[:ss[.ffffff]])."""
    app.emit(app.service.parse(text, pattern=pattern, utc=utc))


@click.command(name="format")
@with_examples(
    """
  timeparts format 2025-04-08T13:52:05 "hh:mm a"
  timeparts format 2025-04-08T13:52:05 readable-date
  timeparts format 2025-04-08T13:52:05 iso8601-utc --utc"""
)
@click.argument("text")
@click.argument("pattern")
@click.option("--utc/--local", "utc", default=None, help="Render in UTC or local time.")
@click.pass_obj
def format_cmd(app: AppContext, text: str, pattern: str, utc: bool | None) -> None:
    """Render TEXT with PATTERN (a pattern or preset name)."""
    app.emit(app.service.format(text, pattern, utc=utc))

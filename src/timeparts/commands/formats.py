"""Command: list the named format presets."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeparts.commands._examples import with_examples

if TYPE_CHECKING:
    from timeparts.commands._context import AppContext


@click.command()
@with_examples(
    """
  timeparts formats
  timeparts formats --at 2025-04-08T13:52:05
  timeparts -q formats"""
)
@click.option("--at", "at", default=None, help="Sample timestamp (default: now).")
@click.pass_obj
def formats(app: AppContext, at: str | None) -> None:
    """List format presets rendered on a sample moment."""
    sample = None
    if at is not None:
        from timeparts.domain.errors import DomainError
        from timeparts.domain.moment import Moment

        try:
            sample = Moment.parse(at)
        except DomainError as exc:
            raise click.BadParameter(str(exc), param_hint="--at") from exc
        if sample is None:
            raise click.BadParameter(f"Could not parse {at!r}", param_hint="--at")
    app.emit(app.service.list_formats(sample))

"""``--examples``: print canned invocations for a command and exit."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import Any

import click


def with_examples(text: str) -> Callable[[Any], Any]:
    """Decorator adding an eager ``--examples`` flag that prints *text*.

    Apply it below ``@click.command``/``@click.group`` like any option.
    Lines of *text* are dedented and indented two spaces.
    """
    body = textwrap.indent(textwrap.dedent(text).strip("\n"), "  ")

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(body)
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )

"""Command group: calendar parts (year, month, weekday, clamp)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timeparts.commands._examples import with_examples

if TYPE_CHECKING:
    from timeparts.commands._context import AppContext

_CALENDAR_EXAMPLES = """\
  timeparts calendar year 2024
  timeparts calendar month 2 --year 2024
  timeparts calendar weekday 6
  timeparts calendar clamp 31 --year 2023 --month 4"""


@click.group()
@with_examples(_CALENDAR_EXAMPLES)
def calendar() -> None:
    """Inspect years, months, weekdays and day clamping."""


@calendar.command()
@with_examples(
    """
  timeparts calendar year 2000
  timeparts -q calendar year 1900"""
)
@click.argument("value", type=int)
@click.pass_obj
def year(app: AppContext, value: int) -> None:
    """Leap-year status and length of a year."""
    app.emit(app.service.describe_year(value))


@calendar.command()
@with_examples(
    """
  timeparts calendar month 4
  timeparts calendar month 2 --year 2024"""
)
@click.argument("code", type=int)
@click.option("--year", "year_value", type=int, default=None, help="Year (default: current).")
@click.pass_obj
def month(app: AppContext, code: int, year_value: int | None) -> None:
    """Names and length of a month (1-12)."""
    app.emit(app.service.describe_month(code, year_value))


@calendar.command()
@with_examples(
    """
  timeparts calendar weekday 1
  timeparts --json calendar weekday 7"""
)
@click.argument("code", type=int)
@click.pass_obj
def weekday(app: AppContext, code: int) -> None:
    """Names and weekend flag of a weekday (1=Monday .. 7=Sunday)."""
    app.emit(app.service.describe_weekday(code))


@calendar.command()
@with_examples(
    """
  timeparts calendar clamp 31 --year 2023 --month 4
  timeparts calendar clamp 29 --year 2024 --month 2"""
)
@click.argument("day", type=int)
@click.option("--year", "year_value", type=int, required=True, help="Year.")
@click.option("--month", "month_value", type=int, required=True, help="Month (1-12).")
@click.pass_obj
def clamp(app: AppContext, day: int, year_value: int, month_value: int) -> None:
    """Cap DAY to the length of the given month."""
    app.emit(app.service.clamp_day(day, year_value, month_value))

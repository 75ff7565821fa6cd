"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from timeparts.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["now", "--examples"], ["timeparts now --format"]),
    (["parse", "--examples"], ["timeparts parse 13:52:05"]),
    (["format", "--examples"], ["readable-date"]),
    (["formats", "--examples"], ["--at"]),
    (["calendar", "--examples"], ["timeparts calendar year 2024", "timeparts calendar clamp"]),
    (["calendar", "year", "--examples"], ["timeparts calendar year 2000"]),
    (["calendar", "month", "--examples"], ["--year 2024"]),
    (["calendar", "weekday", "--examples"], ["timeparts calendar weekday 1"]),
    (["calendar", "clamp", "--examples"], ["--month 4"]),
]


@pytest.mark.parametrize(
    "args,keywords",
    EXAMPLES_COMMANDS,
    ids=["_".join(a for a in args if a != "--examples") for args, _ in EXAMPLES_COMMANDS],
)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in keywords:
        assert kw in result.output


def test_examples_skip_command_body(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["parse", "--examples"])
    assert "ERROR" not in result.output


def test_root_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert result.output.startswith("Examples for 'cli':")
    assert "  timeparts now --format readable-date-time" in result.output


def test_examples_are_indented_two_spaces(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["calendar", "year", "--examples"])
    lines = result.output.splitlines()[2:]
    assert lines == ["  timeparts calendar year 2000", "  timeparts -q calendar year 1900"]


def test_short_help_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Calendar parts and moment formatting." in result.output

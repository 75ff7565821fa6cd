"""Tests for the formats command."""

import json

from click.testing import CliRunner

from timeparts.cli import cli
from timeparts.domain.formats import TimeFormat


class TestFormats:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["formats", "--at", "2025-04-08T13:52:05"])
        assert result.exit_code == 0
        assert "READABLE_DATE_TIME" in result.output
        assert "Tue, 08 Apr 2025 13:52:05" in result.output

    def test_quiet_lists_patterns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "formats"])
        assert result.output.splitlines() == [preset.value for preset in TimeFormat]

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "formats", "--at", "2025-04-08T13:52:05"])
        data = json.loads(result.output)
        assert data["data"]["count"] == len(TimeFormat)
        samples = {item["name"]: item["sample"] for item in data["data"]["items"]}
        assert samples["US_DATE"] == "04/08/2025"

    def test_bad_sample(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["formats", "--at", "whenever"])
        assert result.exit_code == 2
        assert "--at" in result.output

    def test_sample_outside_representable_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["formats", "--at", "9999-12-31T20:00:00Z"])
        assert result.exit_code == 2
        assert "representable range" in result.output

"""Tests for the coalesce CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from presence.cli import cli
from presence.domain.registry import register_existence_check


@pytest.mark.usefixtures("_isolated_project")
class TestCoalesceCommand:
    def test_first_existing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "coalesce", "None", "nan", "0"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "coalesce"
        assert data["data"]["value"] == "0"
        assert data["data"]["index"] == 2

    def test_short_circuits(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "coalesce", "'a'", "'b'", "'c'"])
        data = json.loads(result.output)
        assert data["data"]["evaluated"] == 1

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["coalesce", "...", "'default'"])
        assert result.exit_code == 0
        assert "OK: coalesce" in result.output
        assert "value: 'default'" in result.output

    def test_hook_error_exits_nonzero(self, cli_runner: CliRunner) -> None:
        def hook(value: float) -> bool:
            raise ArithmeticError("unstable")

        register_existence_check(float, hook)
        result = cli_runner.invoke(cli, ["--json", "coalesce", "None", "1.5"])
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "EVALUATION_ERROR"

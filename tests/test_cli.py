"""Tests for the root CLI group and global flags."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from travelctl import __version__
from travelctl.cli import cli


class TestRootGroup:
    def test_help_lists_commands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("add", "remove", "visited", "reset", "catalog", "serve"):
            assert name in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_backend_choice_validated(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--backend", "redis", "visited"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_root")
class TestGlobalFlags:
    def test_json_error_shape(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "remove", "FR"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "NOT_PRESENT"

    def test_backend_env_var(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TRAVELCTL_BACKEND", "memory")
        result = cli_runner.invoke(cli, ["--json", "visited"])
        assert json.loads(result.output)["meta"] == {"backend": "memory"}

    def test_memory_backend_is_per_invocation(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["--backend", "memory", "add", "France"])
        result = cli_runner.invoke(cli, ["--backend", "memory", "-q", "visited"])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_verbose_shows_meta(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "--backend", "memory", "reset"])
        assert result.exit_code == 0, result.output
        assert "backend: memory" in result.output

"""Tests for the root bras CLI."""

import json

from click.testing import CliRunner

from bras import __version__
from bras.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "CPF" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_quiet_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "--version"])
    assert result.exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_verbose_with_json_logs(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "--json", "parse", "98484485439"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["data"]["cpf"] == "984.844.854-39"
    log_lines = [json.loads(line) for line in result.stderr.splitlines() if line.strip()]
    assert any(line["logger"] == "bras.services.cpf" for line in log_lines)


# --- Commands registered ---

EXPECTED_COMMANDS = ["parse", "from-number", "check"]


def test_commands_registered() -> None:
    assert set(cli.commands) == set(EXPECTED_COMMANDS)

"""Tests for the root localeroute CLI."""

import pytest
from click.testing import CliRunner

from localeroute import __version__
from localeroute.cli import cli

pytestmark = pytest.mark.usefixtures("site_root")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "localeroute" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flags", [["--json"], ["-q"], ["-v"], ["--log-json"]])
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


def test_missing_config_file_is_an_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "does-not-exist.toml", "locales"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


EXPECTED_COMMANDS = ["match", "normalize", "domain", "locales"]


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0, f"{command} --help failed: {result.output}"


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert f"localeroute {command}" in result.output


def test_all_commands_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in EXPECTED_COMMANDS:
        assert name in result.output, f"{name} missing from --help"

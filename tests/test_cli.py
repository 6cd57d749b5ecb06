"""Tests for the root typetag CLI."""

from click.testing import CliRunner

from typetag import __version__
from typetag.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "typetag" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    for flag in ("--json", "-q", "-v", "--log-json"):
        result = cli_runner.invoke(cli, [flag, "--version"])
        assert result.exit_code == 0, flag


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/nonexistent/typetag.toml", "--version"])
    assert result.exit_code == 0


EXPECTED_COMMANDS = ["classify", "count", "same-kind", "unique", "catalog"]


def test_commands_registered() -> None:
    assert sorted(cli.commands) == sorted(EXPECTED_COMMANDS)


def test_commands_have_help(cli_runner: CliRunner) -> None:
    for name in EXPECTED_COMMANDS:
        result = cli_runner.invoke(cli, [name, "--help"])
        assert result.exit_code == 0, name


def test_commands_have_examples(cli_runner: CliRunner) -> None:
    for name in EXPECTED_COMMANDS:
        result = cli_runner.invoke(cli, [name, "--examples"])
        assert result.exit_code == 0, name
        assert f"typetag {name}" in result.output

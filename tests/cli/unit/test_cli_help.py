"""CLI smoke tests."""

from click.testing import CliRunner
from sysctl_lint.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "--schema" in result.output
    assert "--strict / --no-strict" in result.output
    assert "CONFIG_PATH" in result.output

"""CLI smoke tests."""

from click.testing import CliRunner
from prompt_schema.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "convert" in result.output
    assert "inspect-prompt" in result.output
    assert "generate-prompt" in result.output

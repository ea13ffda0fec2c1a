"""CLI smoke tests."""

from click.testing import CliRunner
from option_schema_generator.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "generate" in result.output
    assert "fields" in result.output

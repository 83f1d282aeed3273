"""CLI integration tests for the boxui command group."""

from click.testing import CliRunner

from boxui import __version__
from boxui.cli.commands import main as boxui_cli
from boxui.logging_config import LOG_LEVEL_ENV_VAR


def test_cli_help_lists_all_commands():
    """Root CLI help should list all registered subcommands."""
    runner = CliRunner()

    result = runner.invoke(boxui_cli, ["--help"])

    assert result.exit_code == 0
    for command in ("measure", "render"):
        assert command in result.output


def test_cli_unknown_command_reports_error():
    """Unknown commands should produce a helpful error message."""
    runner = CliRunner()

    result = runner.invoke(boxui_cli, ["unknown"])

    assert result.exit_code != 0
    assert "No such command" in result.output


def test_cli_version():
    runner = CliRunner()

    result = runner.invoke(boxui_cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_verbose_logs_layout(nested_tree_path):
    runner = CliRunner()

    result = runner.invoke(boxui_cli, ["--verbose", "render", str(nested_tree_path)])

    assert result.exit_code == 0
    assert "Rendering container 13x3 with 2 children" in result.output


def test_cli_log_file_captures_records(tmp_path, demo_tree_path):
    log_path = tmp_path / "boxui.log"
    runner = CliRunner()

    result = runner.invoke(
        boxui_cli, ["--log-file", str(log_path), "render", str(demo_tree_path)]
    )

    assert result.exit_code == 0
    assert "Rendering container 31x2 with 2 children" in log_path.read_text(encoding="utf-8")


def test_cli_rejects_invalid_log_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "LOUD")
    runner = CliRunner()

    result = runner.invoke(boxui_cli, ["render"])

    assert result.exit_code == 2
    assert LOG_LEVEL_ENV_VAR in result.output

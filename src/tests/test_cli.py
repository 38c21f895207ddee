"""Tests for the command-line interface."""

import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import Mock, patch

import click
import pytest
import yaml
from click.testing import CliRunner

from toolbox import __version__
from toolbox.__main__ import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run every command from an empty directory with an empty home."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in ("TOOLBOX_LOG_LEVEL", "TOOLBOX_LOG_FILE", "TOOLBOX_GENERATOR_OUTPUT_ROOT"):
        monkeypatch.delenv(key, raising=False)
    yield tmp_path


def answers(*values: str | None) -> Mock:
    """Questionary prompt factory whose prompts answer ``values`` in order."""
    prompt = Mock()
    prompt.return_value.ask.side_effect = list(values)
    return prompt


class TestCLIBasics:
    """Test top-level options and help."""

    def test_version_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert f"toolbox {__version__}" in result.output

    def test_help_lists_commands_and_examples(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        output = click.unstyle(result.output)

        assert result.exit_code == 0
        for command in ("tui", "generate", "config", "version"):
            assert command in output
        assert "Examples" in output
        assert "toolbox generate cli pinger" in output

    def test_generate_help_shows_options(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["generate", "--help"])
        output = click.unstyle(result.output)

        assert result.exit_code == 0
        assert "--output-root" in output
        assert "--description" in output


class TestGenerateCommand:
    """Test non-interactive generation."""

    def test_generates_cli_tool(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            cli,
            ["generate", "cli", "pinger", "-d", "Pings a host", "-o", str(tmp_path / "out")],
        )

        assert result.exit_code == 0, result.output
        assert "Successfully generated CLI tool: pinger" in result.output
        main = tmp_path / "out" / "cli" / "pinger" / "main.py"
        assert main.is_file()
        assert "Pings a host" in main.read_text()
        assert "main.py" in result.output

    def test_default_output_root_from_config(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(cli, ["generate", "web", "dash", "-d", "Dashboard"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "cmd" / "web" / "dash" / "main.py").is_file()

    def test_env_overrides_output_root(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TOOLBOX_GENERATOR_OUTPUT_ROOT", "tools")

        result = runner.invoke(cli, ["generate", "tui", "viewer", "-d", "Views things"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "tools" / "tui" / "viewer" / "main.py").is_file()

    def test_tool_type_is_case_insensitive(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(cli, ["generate", "CLI", "pinger", "-d", "Pings"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "cmd" / "cli" / "pinger").is_dir()

    def test_refuses_to_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        args = ["generate", "cli", "pinger", "-d", "Pings a host"]
        assert runner.invoke(cli, args).exit_code == 0
        main = tmp_path / "cmd" / "cli" / "pinger" / "main.py"
        original = main.read_text()

        result = runner.invoke(cli, ["generate", "cli", "pinger", "-d", "Something else"])

        assert result.exit_code == 1
        assert "file already exists" in result.output
        assert main.read_text() == original

    def test_invalid_name(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["generate", "cli", "My_Tool", "-d", "Bad name"])

        assert result.exit_code == 1
        assert "Invalid tool name" in result.output
        assert not (tmp_path / "cmd").exists()

    def test_invalid_tool_type(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["generate", "desktop", "pinger", "-d", "x"])
        assert result.exit_code == 2

    def test_prompts_for_missing_values(self, runner: CliRunner, tmp_path: Path) -> None:
        select = answers("tui")
        text = answers("viewer", "Views log files")

        with patch("toolbox.__main__.questionary.select", select), patch(
            "toolbox.__main__.questionary.text", text
        ):
            result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 0, result.output
        assert select.call_count == 1
        assert text.call_count == 2
        assert (tmp_path / "cmd" / "tui" / "viewer" / "main.py").is_file()

    def test_prompt_cancelled(self, runner: CliRunner, tmp_path: Path) -> None:
        text = answers(None)

        with patch("toolbox.__main__.questionary.text", text):
            result = runner.invoke(cli, ["generate", "cli"])

        assert result.exit_code == 0
        assert "Generation cancelled" in result.output
        assert text.call_count == 1
        assert not (tmp_path / "cmd").exists()


class TestConfigCommands:
    """Test config init/show and config loading errors."""

    def test_init_writes_defaults(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["config", "init"])

        assert result.exit_code == 0, result.output
        data = yaml.safe_load((tmp_path / "configs" / "config.yaml").read_text())
        assert data["log_level"] == "info"
        assert data["generator"]["output_root"] == "cmd"

    def test_init_refuses_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "my.yaml"
        path.write_text("log_level: debug\n")

        result = runner.invoke(cli, ["config", "init", "--path", str(path)])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert path.read_text() == "log_level: debug\n"

    def test_show_uses_discovered_config(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "configs").mkdir()
        (tmp_path / "configs" / "config.yaml").write_text(
            "log_level: error\ngenerator:\n  output_root: tools\n"
        )

        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0, result.output
        data = yaml.safe_load(result.output)
        assert data["log_level"] == "error"
        assert data["generator"]["output_root"] == "tools"

    def test_explicit_config_path(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("log_format: json\n")

        result = runner.invoke(cli, ["--config", str(path), "config", "show"])

        assert result.exit_code == 0, result.output
        assert yaml.safe_load(result.output)["log_format"] == "json"

    def test_invalid_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("log_level: loud\n")

        result = runner.invoke(cli, ["--config", str(path), "config", "show"])

        assert result.exit_code == 1
        assert "Could not load configuration" in result.output

    def test_missing_config_path(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yaml"), "version"])
        assert result.exit_code == 2


class TestTUICommand:
    """Test log routing for the full-screen session."""

    @pytest.mark.parametrize("log_file", ["", "stdout", "stderr"])
    def test_terminal_logs_go_to_textual(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch, log_file: str
    ) -> None:
        from textual.logging import TextualHandler

        monkeypatch.setenv("TOOLBOX_LOG_FILE", log_file)

        with patch("toolbox.tui.app.launch_tui") as launch:
            result = runner.invoke(cli, ["tui"])

        assert result.exit_code == 0, result.output
        context = launch.call_args.args[0]
        assert [type(h) for h in context.logger.handlers] == [TextualHandler]

    def test_file_logs_stay_in_file(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        log_file = tmp_path / "logs" / "toolbox.log"
        monkeypatch.setenv("TOOLBOX_LOG_FILE", str(log_file))

        with patch("toolbox.tui.app.launch_tui") as launch:
            result = runner.invoke(cli, ["tui"])

        assert result.exit_code == 0, result.output
        context = launch.call_args.args[0]
        assert [type(h) for h in context.logger.handlers] == [logging.FileHandler]

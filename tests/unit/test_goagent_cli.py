"""Unit tests for the goagentc command line."""

import json

import pytest
from typer.testing import CliRunner

from goagent.cli import main
from goagent.cli._create_app import _create_app

pytestmark = pytest.mark.cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_no_command_shows_help(runner):
    result = runner.invoke(_create_app(), [])
    assert result.exit_code == 0
    assert "service" in result.output
    assert "config" in result.output


def test_invalid_display(runner):
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "show"])
    assert result.exit_code == 1
    assert "--display must be 'json' or 'yaml'" in result.output


def test_service_render_yaml(runner, goagent_home):
    result = runner.invoke(_create_app(), ["service", "render"])
    assert result.exit_code == 0
    assert "unit_file:" in result.output
    assert "Restart=on-failure" in result.output


def test_config_show_json(runner, goagent_home):
    result = runner.invoke(_create_app(), ["--display", "json", "config", "show", "log"])
    assert result.exit_code == 0
    assert '"level": "DEBUG"' in result.output


def test_config_init_then_refuse(runner, isolated_goagent_home):
    first = runner.invoke(_create_app(), ["config", "init"])
    assert first.exit_code == 0
    assert json.loads((isolated_goagent_home / "config.json").read_text())["service"]["enable"] is False

    second = runner.invoke(_create_app(), ["config", "init"])
    assert second.exit_code == 1

    forced = runner.invoke(_create_app(), ["config", "init", "--force"])
    assert forced.exit_code == 0


def test_service_install_exit_codes(runner, goagent_home, tmp_path):
    result = runner.invoke(_create_app(), ["service", "install"])
    assert result.exit_code == 0
    assert (tmp_path / "systemd" / "gocd-agent.service").exists()

    result = runner.invoke(_create_app(), ["service", "start", "--help"])
    assert result.exit_code == 0


def test_service_without_config_fails(runner):
    result = runner.invoke(_create_app(), ["service", "status"])
    assert result.exit_code == 1
    assert "Configuration file not found" in result.output


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("goagentc ")


def test_main_usage_error(capsys):
    assert main(["service", "bogus"]) == 1
    assert "Usage error" in capsys.readouterr().err


def test_main_runs_command(goagent_home):
    assert main(["config", "show"]) == 0

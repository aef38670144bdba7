"""Unit tests for the goagent.api.config cmd_* functions."""

import json

import pytest

from goagent.api.config.cmd_init import cmd_init
from goagent.api.config.cmd_show import cmd_show
from goagent.api.config.cmd_version import cmd_version

pytestmark = pytest.mark.config


def test_show_all(run_cmd, goagent_home):
    result = run_cmd(cmd_show)

    assert result.success is True
    assert result.output["section"] == ""
    assert set(result.output["content"]) == {"service", "install", "log"}
    assert result.output["config_path"].endswith("config.json")


def test_show_section(run_cmd, goagent_home):
    result = run_cmd(cmd_show, "log")
    assert result.success is True
    assert result.output["content"] == {"level": "DEBUG"}


def test_show_unknown_section(run_cmd, goagent_home):
    result = run_cmd(cmd_show, "database")
    assert result.success is False
    assert "Unknown section" in result.output["errors"][0]


def test_show_without_config(run_cmd):
    result = run_cmd(cmd_show)
    assert result.success is False
    assert result.output["content"] == {}


def test_init_creates_default(run_cmd, isolated_goagent_home):
    result = run_cmd(cmd_init)

    assert result.success is True
    assert result.output["created"] is True
    written = json.loads((isolated_goagent_home / "config.json").read_text())
    assert written["service"]["enable"] is False
    assert written["service"]["go_server"] == "https://127.0.0.1:8154/go"


def test_init_refuses_existing(run_cmd, goagent_home):
    before = (goagent_home / "config.json").read_text()

    result = run_cmd(cmd_init)

    assert result.success is False
    assert result.output["created"] is False
    assert "--force" in result.output["message"]
    assert (goagent_home / "config.json").read_text() == before


def test_init_force_overwrites(run_cmd, goagent_home):
    result = run_cmd(cmd_init, force=True)
    assert result.success is True
    assert json.loads((goagent_home / "config.json").read_text())["log"] == {"level": "INFO"}


def test_version(run_cmd):
    result = run_cmd(cmd_version)
    assert result.success is True
    assert result.output["version"]

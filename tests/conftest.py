"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "service", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_goagent_home(tmp_path: Path, monkeypatch) -> Path:
    """Keep every test away from the real ~/.goagent."""
    home = tmp_path / ".goagent"
    monkeypatch.setenv("GOAGENT_HOME", str(home))
    return home


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(root: Path) -> dict:
    """Minimal valid goagent configuration dict with every install path under ``root``.

    systemd tools are never called.
    """
    return {
        "service": {"enable": True},
        "install": {
            "unit_dir": str(root / "systemd"),
            "sysusers_dir": str(root / "sysusers.d"),
            "tmpfiles_dir": str(root / "tmpfiles.d"),
            "state_dir": str(root / "state"),
            "systemctl": False,
        },
        "log": {"level": "DEBUG"},
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(tmp_path: Path) -> dict:
    return minimal_config_dict(tmp_path)


@pytest.fixture
def goagent_home(isolated_goagent_home: Path, minimal_config_dict: dict) -> Path:
    """Write the minimal config into GOAGENT_HOME.

    Returns:
        Path to the goagent home directory
    """
    isolated_goagent_home.mkdir(parents=True, exist_ok=True)
    (isolated_goagent_home / "config.json").write_text(json.dumps(minimal_config_dict))
    return isolated_goagent_home


# =============================================================================
# Test Helpers
# =============================================================================


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        return cmd_func(*args, **kwargs).run()

    return _run

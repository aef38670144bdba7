"""Unit tests for goagent.api.service.Service module.

Files are written under tmp_path. systemd tools are replaced by a recorder
since there is no other way to exercise them outside a booted system.
"""

import importlib
import os
import subprocess
from pathlib import Path

import pytest

from goagent.api.config.GoAgentConfig import GoAgentConfig
from goagent.api.service.Service import Service

pytestmark = pytest.mark.service

service_module = importlib.import_module("goagent.api.service.Service")


class SystemctlRecorder:
    """Stand-in for subprocess.run that records calls and answers from a table."""

    def __init__(self, responses: dict[tuple[str, ...], tuple[int, str, str]] | None = None):
        self.calls: list[list[str]] = []
        self.responses = responses or {}

    def __call__(self, args, check=False, capture_output=True, text=True):
        self.calls.append(list(args))
        returncode, stdout, stderr = self.responses.get(tuple(args[:2]), (0, "", ""))
        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, args, output=stdout, stderr=stderr)
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)


def make_config(minimal_config_dict: dict, **service) -> GoAgentConfig:
    data = dict(minimal_config_dict)
    data["service"] = {**data["service"], **service}
    return GoAgentConfig(**data)


def test_operations_require_context(minimal_config_dict):
    service = Service(make_config(minimal_config_dict), session_variables={})
    with pytest.raises(RuntimeError, match="context manager"):
        service.install_service()


def test_install_writes_all_files(minimal_config_dict, tmp_path):
    config = make_config(minimal_config_dict, agent_config="agent.auto.register.hostname=Agent01")
    with Service(config, session_variables={}) as service:
        result = service.install_service()
        (artifact_name,) = service.rendered.unit.artifacts

    state = tmp_path / "state"
    unit_path = tmp_path / "systemd" / "gocd-agent.service"
    script_path = state / "gocd-agent-start"
    artifact = state / "artifacts" / artifact_name

    assert result["success"] is True
    assert result["unit_path"] == str(unit_path)
    assert artifact.read_text() == "agent.auto.register.hostname=Agent01"
    assert os.access(script_path, os.X_OK)
    assert f'ln -s "{artifact}" config/autoregister.properties' in script_path.read_text()
    assert f"ExecStart={script_path}" in unit_path.read_text()
    assert (tmp_path / "sysusers.d" / "gocd-agent.conf").read_text().startswith("g gocd-agent -\n")
    assert (tmp_path / "tmpfiles.d" / "gocd-agent.conf").exists()
    assert set(result["files"]) == {
        str(artifact),
        str(script_path),
        str(unit_path),
        str(tmp_path / "sysusers.d" / "gocd-agent.conf"),
        str(tmp_path / "tmpfiles.d" / "gocd-agent.conf"),
    }


def test_install_skips_identity_fragments_for_external_accounts(minimal_config_dict, tmp_path):
    config = make_config(minimal_config_dict, user="builder", group="ci")
    with Service(config, session_variables={}) as service:
        result = service.install_service()

    assert not (tmp_path / "sysusers.d").exists()
    assert not (tmp_path / "tmpfiles.d").exists()
    assert "User=builder" in Path(result["unit_path"]).read_text()


def test_reinstall_replaces_stale_registration_artifact(minimal_config_dict, tmp_path):
    with Service(make_config(minimal_config_dict, agent_config="a=1"), session_variables={}) as service:
        service.install_service()
    with Service(make_config(minimal_config_dict, agent_config="a=2"), session_variables={}) as service:
        service.install_service()

    artifacts = list((tmp_path / "state" / "artifacts").iterdir())
    assert [p.read_text() for p in artifacts] == ["a=2"]


def test_install_runs_systemd_tools(minimal_config_dict, monkeypatch):
    minimal_config_dict["install"]["systemctl"] = True
    recorder = SystemctlRecorder()
    monkeypatch.setattr(service_module.subprocess, "run", recorder)

    with Service(GoAgentConfig(**minimal_config_dict), session_variables={}) as service:
        service.install_service()
        sysusers_path = str(service.sysusers_path)

    assert [call[0] for call in recorder.calls] == [
        "systemd-sysusers",
        "systemd-tmpfiles",
        "systemctl",
        "systemctl",
    ]
    assert recorder.calls[0] == ["systemd-sysusers", sysusers_path]
    assert recorder.calls[-1] == ["systemctl", "enable", "gocd-agent.service"]


def test_install_failure_raises(minimal_config_dict, monkeypatch):
    minimal_config_dict["install"]["systemctl"] = True
    recorder = SystemctlRecorder({("systemctl", "daemon-reload"): (1, "", "Access denied")})
    monkeypatch.setattr(service_module.subprocess, "run", recorder)

    with Service(GoAgentConfig(**minimal_config_dict), session_variables={}) as service:
        with pytest.raises(RuntimeError, match="Access denied"):
            service.install_service()


def test_uninstall_removes_files(minimal_config_dict, tmp_path):
    config = make_config(minimal_config_dict)
    with Service(config, session_variables={}) as service:
        service.install_service()
        result = service.uninstall_service()
        status = service.get_service_status()

    assert result["success"] is True
    assert len(result["removed"]) == 5
    assert status.installed is False
    assert list((tmp_path / "state" / "artifacts").iterdir()) == []


def test_status_reports_pid(minimal_config_dict, monkeypatch):
    minimal_config_dict["install"]["systemctl"] = True
    recorder = SystemctlRecorder({("systemctl", "show"): (0, "4242\n", "")})
    monkeypatch.setattr(service_module.subprocess, "run", recorder)

    with Service(GoAgentConfig(**minimal_config_dict), session_variables={}) as service:
        service.install_service()
        status = service.get_service_status()

    assert status.installed is True
    assert status.running is True
    assert status.pid == 4242


def test_status_not_installed(minimal_config_dict):
    with Service(make_config(minimal_config_dict), session_variables={}) as service:
        status = service.get_service_status()
    assert status.installed is False
    assert status.running is False
    assert status.pid is None


def test_start_requires_install(minimal_config_dict):
    with Service(make_config(minimal_config_dict), session_variables={}) as service:
        result = service.start_service()
    assert result["success"] is False
    assert "Install the service first" in result["error"]


def test_start_and_stop(minimal_config_dict, monkeypatch):
    recorder = SystemctlRecorder()
    monkeypatch.setattr(service_module.subprocess, "run", recorder)

    with Service(make_config(minimal_config_dict), session_variables={}) as service:
        service.install_service()
        assert service.start_service() == {"success": True, "unit_name": "gocd-agent.service"}
        assert service.stop_service() == {"success": True, "unit_name": "gocd-agent.service"}

    assert recorder.calls == [
        ["systemctl", "start", "gocd-agent.service"],
        ["systemctl", "stop", "gocd-agent.service"],
    ]


def test_stop_not_loaded_is_success(minimal_config_dict, monkeypatch):
    recorder = SystemctlRecorder(
        {("systemctl", "stop"): (5, "", "Failed to stop gocd-agent.service: Unit gocd-agent.service not loaded.")}
    )
    monkeypatch.setattr(service_module.subprocess, "run", recorder)

    with Service(make_config(minimal_config_dict), session_variables={}) as service:
        result = service.stop_service()

    assert result["success"] is True
    assert "note" in result


def test_stop_failure(minimal_config_dict, monkeypatch):
    recorder = SystemctlRecorder({("systemctl", "stop"): (1, "", "Access denied")})
    monkeypatch.setattr(service_module.subprocess, "run", recorder)

    with Service(make_config(minimal_config_dict), session_variables={}) as service:
        result = service.stop_service()

    assert result == {"success": False, "error": "Failed to stop service: Access denied"}


def test_ambient_environment_filtered(minimal_config_dict, monkeypatch):
    monkeypatch.setenv("NIX_PATH", "nixpkgs=/channels")
    monkeypatch.setenv("UNRELATED", "leak")

    with Service(make_config(minimal_config_dict)) as service:
        environment = service.rendered.unit.environment

    assert environment["NIX_PATH"] == "nixpkgs=/channels"
    assert "UNRELATED" not in environment

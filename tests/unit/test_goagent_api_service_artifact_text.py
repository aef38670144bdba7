"""Unit tests for the systemd unit, sysusers.d and tmpfiles.d text writers."""

import pytest

from goagent.api.service._sysusers_text import _sysusers_text
from goagent.api.service._tmpfiles_text import _tmpfiles_text
from goagent.api.service._unit_file_text import _unit_file_text
from goagent.api.service.AccountSpec import AccountSpec
from goagent.api.service.GroupSpec import GroupSpec
from goagent.api.service.render import render
from goagent.api.service.ServiceConfig import ServiceConfig

pytestmark = pytest.mark.service


class TestUnitFileText:
    def test_sections_and_policy(self):
        unit = render(ServiceConfig()).unit
        lines = _unit_file_text(unit, "/state/gocd-agent-start").splitlines()

        assert lines[0] == "[Unit]"
        assert "Description=GoCD Agent" in lines
        assert "After=network.target" in lines
        assert "ExecStart=/state/gocd-agent-start" in lines
        assert "User=gocd-agent" in lines
        assert "WorkingDirectory=/var/lib/go-agent" in lines
        assert "Restart=on-failure" in lines
        assert "RestartSec=30" in lines
        assert lines[-2:] == ["[Install]", "WantedBy=multi-user.target"]
        assert lines.index("[Unit]") < lines.index("[Service]") < lines.index("[Install]")

    def test_path_comes_first(self):
        unit = render(ServiceConfig(packages=["/usr"])).unit
        environment_lines = [
            line for line in _unit_file_text(unit, "/s").splitlines() if line.startswith("Environment=")
        ]
        assert environment_lines[0] == 'Environment="PATH=/usr/bin:/usr/sbin"'
        assert 'Environment="NIX_REMOTE=daemon"' in environment_lines
        assert 'Environment="LOG_FILE=/var/lib/go-agent/go-agent-start.log"' in environment_lines

    def test_caller_path_overrides_search_path(self):
        unit = render(ServiceConfig(environment={"PATH": "/custom/bin"})).unit
        text = _unit_file_text(unit, "/s")
        assert 'Environment="PATH=/custom/bin"' in text
        assert text.count("Environment=\"PATH=") == 1

    def test_values_are_escaped(self):
        unit = render(ServiceConfig(environment={"MSG": 'say "hi" 100%'})).unit
        assert 'Environment="MSG=say \\"hi\\" 100%%"' in _unit_file_text(unit, "/s")

    def test_line_breaks_stay_inside_value(self):
        unit = render(ServiceConfig(environment={"MOTD": "hello\nExecStartPre=/bin/touch /tmp/x\r"})).unit
        text = _unit_file_text(unit, "/s")
        assert "\nExecStartPre=" not in text
        assert 'Environment="MOTD=hello\\nExecStartPre=/bin/touch /tmp/x\\r"' in text

    def test_text_is_stable(self):
        unit = render(ServiceConfig()).unit
        assert _unit_file_text(unit, "/s") == _unit_file_text(unit, "/s")


class TestSysusersText:
    def test_default_user_and_group(self):
        account = AccountSpec(
            name="gocd-agent", home="/var/lib/go-agent", group="gocd-agent", extra_groups=("wheel", "docker")
        )
        text = _sysusers_text(account, GroupSpec(name="gocd-agent"))
        assert text.splitlines() == [
            "g gocd-agent -",
            'u gocd-agent - "gocd-agent user" /var/lib/go-agent /bin/bash',
            "m gocd-agent wheel",
            "m gocd-agent docker",
        ]

    def test_user_with_external_group(self):
        account = AccountSpec(name="gocd-agent", home="/srv/agent", group="ci")
        assert _sysusers_text(account, None) == 'u gocd-agent -:ci "gocd-agent user" /srv/agent /bin/bash\n'

    def test_nothing_managed(self):
        assert _sysusers_text(None, None) == ""


class TestTmpfilesText:
    def test_home_created_for_managed_account(self):
        account = AccountSpec(name="gocd-agent", home="/var/lib/go-agent", group="gocd-agent")
        assert _tmpfiles_text(account) == "d /var/lib/go-agent 0700 gocd-agent gocd-agent -\n"

    def test_no_account(self):
        assert _tmpfiles_text(None) == ""

    def test_create_home_disabled(self):
        account = AccountSpec(name="gocd-agent", home="/h", group="g", create_home=False)
        assert _tmpfiles_text(account) == ""

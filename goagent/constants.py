"""Shared constants for the GoCD agent service and its goagent state."""

GOAGENT_HOME_EXT = ".goagent"  # user-level state/config directory suffix


# Account and group names that goagent provisions itself
DEFAULT_ACCOUNT_NAME = "gocd-agent"

UNIT_NAME = "gocd-agent"
UNIT_DESCRIPTION = "GoCD Agent"
UNIT_AFTER = ("network.target",)
UNIT_WANTED_BY = ("multi-user.target",)

# Restart policy handed to systemd; never computed
RESTART_POLICY = "on-failure"
RESTART_SEC = 30

# Only these ambient session variables reach the agent process
FORWARDED_SESSION_VARIABLES = ("NIX_PATH",)

AUTOREGISTER_LINK = "config/autoregister.properties"
SSL_CA_INFO = "/etc/ssl/certs/ca-certificates.crt"
DEFAULT_SHELL = "/bin/bash"
START_LOG_NAME = "go-agent-start.log"

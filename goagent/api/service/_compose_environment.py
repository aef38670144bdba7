"""Compose the agent process environment."""

from collections.abc import Mapping

from ...constants import FORWARDED_SESSION_VARIABLES, START_LOG_NAME
from .ServiceConfig import ServiceConfig


def _compose_environment(cfg: ServiceConfig, session_variables: Mapping[str, str] | None = None) -> dict[str, str]:
    """Build the environment in precedence order.

    Forwarded session variables come first, then the computed agent keys,
    then ``cfg.environment``, which wins every collision.
    """
    environment: dict[str, str] = {}
    if session_variables is not None:
        for name in FORWARDED_SESSION_VARIABLES:
            if name in session_variables:
                environment[name] = session_variables[name]

    environment.update(
        {
            "NIX_REMOTE": "daemon",
            "AGENT_WORK_DIR": cfg.work_dir,
            "AGENT_STARTUP_ARGS": " ".join(cfg.startup_options),
            "LOG_DIR": cfg.work_dir,
            "LOG_FILE": f"{cfg.work_dir}/{START_LOG_NAME}",
        }
    )
    environment.update(cfg.environment)
    return environment

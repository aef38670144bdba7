"""Assemble the agent launch command."""

from .ServiceConfig import ServiceConfig


def _assemble_command(cfg: ServiceConfig) -> tuple[str, ...]:
    """JVM options first, then the bootstrapper jar and server URL."""
    return (
        cfg.java,
        *cfg.startup_options,
        *cfg.extra_options,
        "-jar",
        cfg.agent_jar,
        "-serverUrl",
        cfg.go_server,
    )

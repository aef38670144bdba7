"""Service status DTO."""

from dataclasses import dataclass


@dataclass
class ServiceStatus:
    """Status of the agent's systemd unit."""

    installed: bool
    """Whether the unit file exists."""

    unit_path: str
    """Path to the unit file."""

    running: bool = False
    """Whether the unit is currently active."""

    pid: int | None = None
    """Main PID of the running unit, or None if not running."""

"""OS group to provision for the agent."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GroupSpec:
    """Group handed to the OS identity store."""

    name: str

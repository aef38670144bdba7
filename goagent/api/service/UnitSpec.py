"""Supervised-service descriptor for the agent."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class UnitSpec:
    """Everything systemd needs to run the agent.

    ``artifacts`` maps artifact file names to their text content; the script
    refers to them under the artifact directory it was rendered for.
    """

    name: str
    description: str
    after: tuple[str, ...]
    wanted_by: tuple[str, ...]
    environment: dict[str, str]
    path: tuple[str, ...]
    command: tuple[str, ...]
    script: str
    service_config: dict[str, Any]
    artifacts: dict[str, str] = field(default_factory=dict)

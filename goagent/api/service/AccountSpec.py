"""OS user account to provision for the agent."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AccountSpec:
    """User account handed to the OS identity store."""

    name: str
    home: str
    group: str
    extra_groups: tuple[str, ...] = field(default_factory=tuple)
    description: str = "gocd-agent user"
    create_home: bool = True
    use_default_shell: bool = True

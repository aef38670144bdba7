"""Render a ServiceConfig into account, group and unit specs."""

from collections.abc import Mapping
from pathlib import PurePosixPath

from ...constants import (
    RESTART_POLICY,
    RESTART_SEC,
    UNIT_AFTER,
    UNIT_DESCRIPTION,
    UNIT_NAME,
    UNIT_WANTED_BY,
)
from ._assemble_command import _assemble_command
from ._build_script import _build_script
from ._compose_environment import _compose_environment
from ._derive_accounts import _derive_accounts
from ._registration_artifact import _registration_artifact
from ._search_path import _search_path
from .RenderedService import RenderedService
from .ServiceConfig import ServiceConfig
from .UnitSpec import UnitSpec

DEFAULT_ARTIFACT_DIR = "/var/lib/goagent/artifacts"


def render(
    cfg: ServiceConfig,
    session_variables: Mapping[str, str] | None = None,
    artifact_dir: str = DEFAULT_ARTIFACT_DIR,
) -> RenderedService:
    """Render the agent service descriptors.

    Pure: performs no I/O and returns equal results for equal inputs.

    Args:
        cfg: Service configuration
        session_variables: Ambient session environment; only NIX_PATH is read from it
        artifact_dir: Directory the artifacts will be installed into

    Returns:
        RenderedService with account/group specs (None when externally managed)
        and the unit spec
    """
    account, group = _derive_accounts(cfg)

    registration_name = _registration_artifact(cfg.agent_config)
    registration_file = str(PurePosixPath(artifact_dir) / registration_name)
    command = _assemble_command(cfg)

    unit = UnitSpec(
        name=UNIT_NAME,
        description=UNIT_DESCRIPTION,
        after=UNIT_AFTER,
        wanted_by=UNIT_WANTED_BY,
        environment=_compose_environment(cfg, session_variables),
        path=_search_path(cfg.packages),
        command=command,
        script=_build_script(cfg.git, command, registration_file),
        service_config={
            "User": cfg.user,
            "WorkingDirectory": cfg.work_dir,
            "RestartSec": RESTART_SEC,
            "Restart": RESTART_POLICY,
        },
        artifacts={registration_name: cfg.agent_config},
    )
    return RenderedService(account=account, group=group, unit=unit)

"""Service public API - installs and manages the GoCD agent as a systemd unit."""

import logging
import os
import subprocess
from collections.abc import Mapping
from contextlib import suppress
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ...utils.logger import configure_logging
from ._sysusers_text import _sysusers_text
from ._tmpfiles_text import _tmpfiles_text
from ._unit_file_text import _unit_file_text
from .RenderedService import RenderedService
from .ServiceStatus import ServiceStatus
from .render import render

if TYPE_CHECKING:
    from ..config.GoAgentConfig import GoAgentConfig

logger = logging.getLogger(__name__)


class Service:
    """Public API for service operations.

    Rendering happens once on ``__enter__``; every operation works from
    that rendered descriptor.
    """

    def __init__(self, config: "GoAgentConfig", session_variables: Mapping[str, str] | None = None):
        self.config = config
        self.session_variables = os.environ if session_variables is None else session_variables
        self._rendered: RenderedService | None = None
        configure_logging(level=config.log.level)

    def __enter__(self) -> "Service":
        self._rendered = render(
            self.config.service,
            session_variables=self.session_variables,
            artifact_dir=str(self.artifact_dir),
        )
        logger.debug("Rendered unit %s for user %s", self._rendered.unit.name, self.config.service.user)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    @property
    def rendered(self) -> RenderedService:
        if self._rendered is None:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._rendered

    @property
    def unit_name(self) -> str:
        return f"{self.rendered.unit.name}.service"

    @property
    def state_dir(self) -> Path:
        return Path(self.config.install.state_dir)

    @property
    def artifact_dir(self) -> Path:
        return self.state_dir / "artifacts"

    @property
    def script_path(self) -> Path:
        return self.state_dir / f"{self.rendered.unit.name}-start"

    @property
    def unit_path(self) -> Path:
        return Path(self.config.install.unit_dir) / self.unit_name

    @property
    def sysusers_path(self) -> Path:
        return Path(self.config.install.sysusers_dir) / f"{self.rendered.unit.name}.conf"

    @property
    def tmpfiles_path(self) -> Path:
        return Path(self.config.install.tmpfiles_dir) / f"{self.rendered.unit.name}.conf"

    def unit_file_text(self) -> str:
        return _unit_file_text(self.rendered.unit, str(self.script_path))

    def sysusers_text(self) -> str:
        return _sysusers_text(self.rendered.account, self.rendered.group)

    def tmpfiles_text(self) -> str:
        return _tmpfiles_text(self.rendered.account)

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        logger.debug("Running %s", " ".join(args))
        return subprocess.run(list(args), check=check, capture_output=True, text=True)

    def install_service(self) -> dict[str, Any]:
        """Write artifacts, start script, unit and identity fragments, then enable the unit.

        Returns:
            Dictionary with installation result (success, unit_name, unit_path, files)

        Raises:
            RuntimeError: If a required systemd tool fails
        """
        rendered = self.rendered
        written: list[str] = []

        self.artifact_dir.mkdir(parents=True, exist_ok=True)
        for name, content in rendered.unit.artifacts.items():
            artifact_path = self.artifact_dir / name
            artifact_path.write_text(content, encoding="utf-8")
            written.append(str(artifact_path))
        for stale in self.artifact_dir.glob("autoregister-*.properties"):
            if stale.name not in rendered.unit.artifacts:
                stale.unlink()

        self.script_path.write_text(rendered.unit.script, encoding="utf-8")
        self.script_path.chmod(0o755)
        written.append(str(self.script_path))

        self.unit_path.parent.mkdir(parents=True, exist_ok=True)
        self.unit_path.write_text(self.unit_file_text(), encoding="utf-8")
        written.append(str(self.unit_path))

        sysusers = self.sysusers_text()
        if sysusers:
            self.sysusers_path.parent.mkdir(parents=True, exist_ok=True)
            self.sysusers_path.write_text(sysusers, encoding="utf-8")
            written.append(str(self.sysusers_path))

        tmpfiles = self.tmpfiles_text()
        if tmpfiles:
            self.tmpfiles_path.parent.mkdir(parents=True, exist_ok=True)
            self.tmpfiles_path.write_text(tmpfiles, encoding="utf-8")
            written.append(str(self.tmpfiles_path))

        logger.info("Wrote %d files for %s", len(written), self.unit_name)

        if self.config.install.systemctl:
            steps: list[tuple[str, ...]] = []
            if sysusers:
                steps.append(("systemd-sysusers", str(self.sysusers_path)))
            if tmpfiles:
                steps.append(("systemd-tmpfiles", "--create", str(self.tmpfiles_path)))
            steps.append(("systemctl", "daemon-reload"))
            steps.append(("systemctl", "enable", self.unit_name))
            for step in steps:
                try:
                    self._run(*step)
                except subprocess.CalledProcessError as e:
                    logger.error("%s failed: %s", step[0], e.stderr)
                    raise RuntimeError(f"Failed to run {' '.join(step)}: {e.stderr}") from e

        return {
            "success": True,
            "unit_name": self.unit_name,
            "unit_path": str(self.unit_path),
            "files": written,
        }

    def uninstall_service(self) -> dict[str, Any]:
        """Stop and disable the unit, then remove everything install wrote."""
        if self.config.install.systemctl:
            with suppress(Exception):
                self._run("systemctl", "stop", self.unit_name, check=False)
            with suppress(Exception):
                self._run("systemctl", "disable", self.unit_name, check=False)

        removed: list[str] = []
        for path in (self.unit_path, self.script_path, self.sysusers_path, self.tmpfiles_path):
            if path.exists():
                path.unlink()
                removed.append(str(path))
        if self.artifact_dir.exists():
            for artifact in sorted(self.artifact_dir.glob("autoregister-*.properties")):
                artifact.unlink()
                removed.append(str(artifact))

        if self.config.install.systemctl:
            with suppress(Exception):
                self._run("systemctl", "daemon-reload", check=False)

        logger.info("Removed %d files for %s", len(removed), self.unit_name)
        return {
            "success": True,
            "unit_name": self.unit_name,
            "removed": removed,
        }

    def get_service_status(self) -> ServiceStatus:
        """Get unit status (installed, running, pid)."""
        status = ServiceStatus(installed=self.unit_path.exists(), unit_path=str(self.unit_path))
        if not status.installed or not self.config.install.systemctl:
            return status

        result = self._run("systemctl", "is-active", self.unit_name, check=False)
        status.running = result.returncode == 0
        if status.running:
            pid_result = self._run(
                "systemctl", "show", self.unit_name, "--property=MainPID", "--value", check=False
            )
            if pid_result.returncode == 0:
                pid_str = pid_result.stdout.strip()
                if pid_str and pid_str != "0":
                    with suppress(ValueError):
                        status.pid = int(pid_str)
        return status

    def start_service(self) -> dict[str, Any]:
        """Start the unit via systemctl."""
        if not self.unit_path.exists():
            return {
                "success": False,
                "error": f"Service unit file not found at {self.unit_path}. Install the service first.",
            }
        try:
            self._run("systemctl", "start", self.unit_name)
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else "Unknown error"
            logger.error("Failed to start %s: %s", self.unit_name, error_msg)
            return {"success": False, "error": f"Failed to start service: {error_msg}"}
        logger.info("Started %s", self.unit_name)
        return {"success": True, "unit_name": self.unit_name}

    def stop_service(self) -> dict[str, Any]:
        """Stop the unit via systemctl; stopping a unit that is not loaded succeeds."""
        try:
            self._run("systemctl", "stop", self.unit_name)
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else ""
            if "not loaded" in error_msg.lower() or "not found" in error_msg.lower():
                return {
                    "success": True,
                    "unit_name": self.unit_name,
                    "note": "Service was not running (already stopped).",
                }
            logger.error("Failed to stop %s: %s", self.unit_name, error_msg)
            return {
                "success": False,
                "error": f"Failed to stop service: {error_msg}" if error_msg else "Failed to stop service.",
            }
        logger.info("Stopped %s", self.unit_name)
        return {"success": True, "unit_name": self.unit_name}

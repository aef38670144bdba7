"""Output schemas for service commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceRenderOutput(BaseOutputSchema):
    """Output schema for service render command.

    Every artifact is always present; unmanaged account or group render as
    an empty dict and empty fragments render as an empty string.
    """

    account: dict[str, Any] = Field(..., description="Account spec, empty dict when externally managed")
    group: dict[str, Any] = Field(..., description="Group spec, empty dict when externally managed")
    unit: dict[str, Any] = Field(..., description="Unit spec handed to systemd")
    unit_file: str = Field(..., description="Rendered systemd unit file text")
    sysusers: str = Field(..., description="Rendered sysusers.d fragment, empty string if none")
    tmpfiles: str = Field(..., description="Rendered tmpfiles.d fragment, empty string if none")


class ServiceInstallOutput(BaseOutputSchema):
    """Output schema for service install command."""

    message: str = Field(..., description="Human-readable result")
    installed: bool = Field(..., description="Whether the unit was installed")
    unit_path: str = Field(..., description="Path to the unit file, empty string if not installed")
    files: list[str] = Field(..., description="Files written by the install")


class ServiceUninstallOutput(BaseOutputSchema):
    """Output schema for service uninstall command."""

    message: str = Field(..., description="Human-readable result")
    uninstalled: bool = Field(..., description="Whether the unit was removed")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""

    message: str = Field(..., description="Human-readable result")
    running: bool = Field(..., description="Whether the unit is running")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""

    message: str = Field(..., description="Human-readable result")
    stopped: bool = Field(..., description="Whether the unit is stopped")


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command."""

    installed: bool = Field(..., description="Whether the unit file exists")
    running: bool = Field(..., description="Whether the unit is active")
    pid: int = Field(..., description="Main PID if running, -1 if not running")
    unit_path: str = Field(..., description="Path to the unit file")


register_output_schema("service", "render", ServiceRenderOutput)
register_output_schema("service", "install", ServiceInstallOutput)
register_output_schema("service", "uninstall", ServiceUninstallOutput)
register_output_schema("service", "start", ServiceStartOutput)
register_output_schema("service", "stop", ServiceStopOutput)
register_output_schema("service", "status", ServiceStatusOutput)

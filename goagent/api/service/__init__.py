"""Service module - renders the GoCD agent service and installs it under systemd."""

from .._output_schemas.service import (
    ServiceInstallOutput,
    ServiceRenderOutput,
    ServiceStartOutput,
    ServiceStatusOutput,
    ServiceStopOutput,
    ServiceUninstallOutput,
)
from .AccountPolicy import AccountPolicy
from .RenderedService import RenderedService
from .ServiceConfig import ServiceConfig
from .render import render

__all__ = [
    "AccountPolicy",
    "RenderedService",
    "ServiceConfig",
    "ServiceInstallOutput",
    "ServiceRenderOutput",
    "ServiceStartOutput",
    "ServiceStatusOutput",
    "ServiceStopOutput",
    "ServiceUninstallOutput",
    "render",
]

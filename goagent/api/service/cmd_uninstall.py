"""Service uninstall command - removes the agent systemd unit."""

from collections.abc import Iterator

from ..config.GoAgentConfig import GoAgentConfig
from ..StageResult import StageResult
from . import ServiceUninstallOutput
from .Service import Service


def cmd_uninstall() -> StageResult:
    """Uninstall the agent service."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = GoAgentConfig.load()

            yield (0.6, "Uninstalling service...")
            with Service(config) as service:
                result = service.uninstall_service()

            yield (1.0, "Complete")
            if result["removed"]:
                result_obj.result = "Service uninstalled successfully"
            else:
                result_obj.result = "Service was not installed"
            result_obj.output = ServiceUninstallOutput(
                errors=[],
                warnings=[],
                message=result_obj.result,
                uninstalled=True,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error uninstalling service: {e}"
            result_obj.output = ServiceUninstallOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                uninstalled=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Uninstalling agent service...",
        progress_callback=do_work,
    )

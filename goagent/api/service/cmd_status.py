"""Service status command - shows whether the agent unit is installed and running."""

from collections.abc import Iterator

from ..config.GoAgentConfig import GoAgentConfig
from ..StageResult import StageResult
from . import ServiceStatusOutput
from .Service import Service


def cmd_status() -> StageResult:
    """Get agent unit status."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = GoAgentConfig.load()

            yield (0.5, "Checking service status...")
            with Service(config) as service:
                status = service.get_service_status()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking service status: {e}"
            result_obj.output = ServiceStatusOutput(
                errors=[f"service status error: {e}"],
                warnings=[],
                installed=False,
                running=False,
                pid=-1,
                unit_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings: list[str] = []
        if status.installed and not config.install.systemctl:
            warnings.append("install.systemctl is false; running state not queried")

        yield (1.0, "Complete")
        if status.running:
            result_obj.result = f"Service running (PID: {status.pid})"
        elif status.installed:
            result_obj.result = "Service installed but not running"
        else:
            result_obj.result = "Service not installed"
        result_obj.output = ServiceStatusOutput(
            errors=[],
            warnings=warnings,
            installed=status.installed,
            running=status.running,
            pid=status.pid if status.pid is not None else -1,
            unit_path=status.unit_path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking agent service status...",
        progress_callback=do_work,
    )

"""Service install command - installs the agent as a systemd unit."""

from collections.abc import Iterator

from ..config.GoAgentConfig import GoAgentConfig
from ..StageResult import StageResult
from . import ServiceInstallOutput
from .Service import Service


def cmd_install() -> StageResult:
    """Install the agent service.

    Reads the configuration, renders the descriptors and writes them into
    the install locations. Refuses when ``service.enable`` is false.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = GoAgentConfig.load()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = ServiceInstallOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                installed=False,
                unit_path="",
                files=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.2, "Checking service is enabled...")
        if not config.service.enable:
            yield (1.0, "Complete")
            error_msg = "Service is disabled. Set service.enable to true to install it."
            result_obj.result = f"Error: {error_msg}"
            result_obj.output = ServiceInstallOutput(
                errors=[error_msg],
                warnings=[],
                message=error_msg,
                installed=False,
                unit_path="",
                files=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Installing service...")
        try:
            with Service(config) as service:
                result = service.install_service()

            yield (1.0, "Complete")
            result_obj.result = f"Service installed successfully (unit: {result['unit_name']})"
            result_obj.output = ServiceInstallOutput(
                errors=[],
                warnings=[],
                message=result_obj.result,
                installed=True,
                unit_path=result["unit_path"],
                files=result["files"],
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error installing service: {e}"
            result_obj.output = ServiceInstallOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                installed=False,
                unit_path="",
                files=[],
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Installing agent service...",
        progress_callback=do_work,
    )

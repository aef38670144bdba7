"""Service start command - starts the agent unit."""

from collections.abc import Iterator

from ..config.GoAgentConfig import GoAgentConfig
from ..StageResult import StageResult
from . import ServiceStartOutput
from .Service import Service


def cmd_start() -> StageResult:
    """Start the agent via systemd.

    The unit must be installed first; systemd then restarts it on failure
    every 30 seconds without limit.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = GoAgentConfig.load()

            yield (0.5, "Starting service...")
            with Service(config) as service:
                result = service.start_service()

            yield (1.0, "Complete")
            if result["success"]:
                result_obj.result = f"Service started successfully (unit: {result['unit_name']})"
                errors: list[str] = []
            else:
                result_obj.result = f"Error starting service: {result['error']}"
                errors = [result["error"]]
            result_obj.output = ServiceStartOutput(
                errors=errors,
                warnings=[],
                message=result_obj.result,
                running=result["success"],
            ).model_dump(mode="python")
            result_obj.success = result["success"]
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error starting service: {e}"
            result_obj.output = ServiceStartOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                running=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Starting agent service...",
        progress_callback=do_work,
    )

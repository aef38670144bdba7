"""Service stop command - stops the agent unit."""

from collections.abc import Iterator

from ..config.GoAgentConfig import GoAgentConfig
from ..StageResult import StageResult
from . import ServiceStopOutput
from .Service import Service


def cmd_stop() -> StageResult:
    """Stop the agent via systemd."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = GoAgentConfig.load()

            yield (0.5, "Stopping service...")
            with Service(config) as service:
                result = service.stop_service()

            yield (1.0, "Complete")
            if result["success"]:
                if "note" in result:
                    result_obj.result = "Service is already stopped"
                else:
                    result_obj.result = "Service stopped successfully"
            else:
                result_obj.result = f"Error stopping service: {result['error']}"
            result_obj.output = ServiceStopOutput(
                errors=[] if result["success"] else [result["error"]],
                warnings=[],
                message=result_obj.result,
                stopped=result["success"],
            ).model_dump(mode="python")
            result_obj.success = result["success"]
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error stopping service: {e}"
            result_obj.output = ServiceStopOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                stopped=False,
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Stopping agent service...",
        progress_callback=do_work,
    )

"""Service render command - shows what would be installed without touching the system."""

from collections.abc import Iterator

from ..config.GoAgentConfig import GoAgentConfig
from ..StageResult import StageResult
from . import ServiceRenderOutput
from .Service import Service


def _error_output(message: str) -> dict:
    return ServiceRenderOutput(
        errors=[message],
        warnings=[],
        account={},
        group={},
        unit={},
        unit_file="",
        sysusers="",
        tmpfiles="",
    ).model_dump(mode="python")


def cmd_render() -> StageResult:
    """Render account, group and unit descriptors from the configuration."""

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
            result_obj.output = _error_output(str(e))
            result_obj.success = False
            return

        yield (0.5, "Rendering service descriptors...")
        try:
            with Service(config) as service:
                rendered = service.rendered.to_dict()
                unit_file = service.unit_file_text()
                sysusers = service.sysusers_text()
                tmpfiles = service.tmpfiles_text()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error rendering service: {e}"
            result_obj.output = _error_output(str(e))
            result_obj.success = False
            return

        warnings: list[str] = []
        if not config.service.enable:
            warnings.append("service.enable is false; install will refuse this configuration")

        yield (1.0, "Complete")
        result_obj.result = f"Rendered unit {rendered['unit']['name']}"
        result_obj.output = ServiceRenderOutput(
            errors=[],
            warnings=warnings,
            account=rendered["account"],
            group=rendered["group"],
            unit=rendered["unit"],
            unit_file=unit_file,
            sysusers=sysusers,
            tmpfiles=tmpfiles,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Rendering service...",
        progress_callback=do_work,
    )

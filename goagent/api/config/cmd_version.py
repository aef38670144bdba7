"""Config version command."""

from collections.abc import Iterator

from ...utils.get_package_version import get_package_version
from ..StageResult import StageResult
from . import ConfigVersionOutput


def cmd_version() -> StageResult:
    """Report the installed goagent version."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        version = get_package_version()
        result_obj.result = f"goagent {version}"
        result_obj.output = ConfigVersionOutput(errors=[], warnings=[], version=version).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Reading version...",
        progress_callback=do_work,
    )

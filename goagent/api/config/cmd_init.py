"""Config init command - writes a default configuration file."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigInitOutput
from .GoAgentConfig import GoAgentConfig


def cmd_init(force: bool = False) -> StageResult:
    """Write a configuration file with every option at its default.

    An existing file is left alone unless ``force`` is set.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = GoAgentConfig.get_config_path()

        yield (0.3, "Checking for existing configuration...")
        if config_path.exists() and not force:
            yield (1.0, "Complete")
            message = f"Configuration already exists at {config_path} (use --force to overwrite)"
            result_obj.result = f"Error: {message}"
            result_obj.output = ConfigInitOutput(
                errors=[message],
                warnings=[],
                config_path=str(config_path),
                created=False,
                message=message,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Writing default configuration...")
        try:
            GoAgentConfig().save()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error writing configuration: {e}"
            result_obj.output = ConfigInitOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(config_path),
                created=False,
                message=str(e),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        message = f"Configuration written to {config_path}"
        result_obj.result = message
        result_obj.output = ConfigInitOutput(
            errors=[],
            warnings=[],
            config_path=str(config_path),
            created=True,
            message=message,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Initializing configuration...",
        progress_callback=do_work,
    )

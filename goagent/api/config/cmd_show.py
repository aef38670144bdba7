"""Config show command - prints the effective configuration."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import ConfigShowOutput
from .GoAgentConfig import GoAgentConfig


def cmd_show(section: str = "") -> StageResult:
    """Show the effective config, or one section of it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(GoAgentConfig.get_config_path())

        yield (0.2, "Loading configuration...")
        try:
            config = GoAgentConfig.load()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=config_path,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Selecting section...")
        content = config.to_dict()
        if section:
            if section not in content:
                yield (1.0, "Complete")
                error_msg = f"Unknown section: {section!r} (sections: {list(content.keys())})"
                result_obj.result = f"Error: {error_msg}"
                result_obj.output = ConfigShowOutput(
                    errors=[error_msg],
                    warnings=[],
                    section=section,
                    content={},
                    config_path=config_path,
                ).model_dump(mode="python")
                result_obj.success = False
                return
            content = content[section]

        yield (1.0, "Complete")
        result_obj.result = f"Configuration loaded from {config_path}"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=[],
            section=section,
            content=content,
            config_path=config_path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )

"""Check command outputs against the schema registered for the command.

Commands are located by module path: ``goagent.api.<domain>.cmd_<name>``
is checked against the schema registered as ``(<domain>, <name>)``.
"""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema

_API_PREFIX = ("goagent", "api")


def _command_key(func: Callable) -> tuple[str, str] | None:
    parts = tuple(func.__module__.split("."))
    if len(parts) < 3 or parts[:2] != _API_PREFIX:
        return None
    if not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return ``output`` validated (and defaults filled) by the command's schema.

    Outputs of functions outside ``goagent.api`` or without a registered
    schema come back unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    key = _command_key(func)
    schema_class = get_output_schema(*key) if key else None
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        domain, command_name = key  # type: ignore[misc]
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}\nGot output: {output}") from e

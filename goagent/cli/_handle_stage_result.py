"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML)

    Args:
        func: Function that returns StageResult

    Returns:
        Wrapped function that handles display and exits with appropriate code
    """

    def _extract_display_format() -> str:
        import click

        current = click.get_current_context(silent=True)
        while current is not None:
            obj = current.obj
            if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
                return obj["display_format"]
            current = current.parent
        return "yaml"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from goagent.cli.display import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format())

    return wrapper  # type: ignore[return-value]

"""Outcome of a goagent command: announce, progress, result and output stages."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

ProgressCallback = Callable[["StageResult"], Iterator[tuple[float, str]]]


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands back to its caller.

    Nothing happens until ``progress_callback`` is iterated. The callback
    yields ``(fraction, message)`` pairs and fills in ``result``, ``output``
    and ``success`` before it finishes.
    """

    announce: str
    progress_callback: ProgressCallback
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False

    def run(self) -> "StageResult":
        """Drain the progress stage without displaying it."""
        for _ in self.progress_callback(self):
            pass
        return self

"""Config module - goagent configuration loading and commands."""

from .._output_schemas.config import ConfigInitOutput, ConfigShowOutput, ConfigVersionOutput
from .GoAgentConfig import GoAgentConfig
from .LogConfig import LogConfig

__all__ = [
    "ConfigInitOutput",
    "ConfigShowOutput",
    "ConfigVersionOutput",
    "GoAgentConfig",
    "LogConfig",
]

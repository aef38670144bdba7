"""Utility to discover goagent home directory."""

import os
from pathlib import Path

from ..constants import GOAGENT_HOME_EXT


def get_goagent_home(*parts: str) -> Path:
    """Get goagent home directory based on GOAGENT_HOME or default to ~/.goagent.

    Extra path parts are joined onto the home directory.
    """
    home_env = os.environ.get("GOAGENT_HOME")
    if home_env:
        base = Path(home_env).expanduser().resolve()
    else:
        base = Path.home() / GOAGENT_HOME_EXT
    return base.joinpath(*parts)

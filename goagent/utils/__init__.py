"""goagent utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .get_goagent_home import get_goagent_home
from .get_package_version import get_package_version

__all__ = [
    "get_goagent_home",
    "get_package_version",
]

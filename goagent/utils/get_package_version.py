"""Installed package version lookup."""

from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Return the installed goagent version, or the in-tree version when not installed."""
    try:
        return version("goagent")
    except PackageNotFoundError:
        from .. import __version__

        return __version__

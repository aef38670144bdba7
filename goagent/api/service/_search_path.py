"""Executable search path for the agent process."""

from collections.abc import Sequence
from pathlib import PurePosixPath


def _search_path(packages: Sequence[str]) -> tuple[str, ...]:
    """Return bin/ and sbin/ of every package prefix, in package order."""
    entries: list[str] = []
    for package in packages:
        prefix = PurePosixPath(package or "/")
        entries.append(str(prefix / "bin"))
        entries.append(str(prefix / "sbin"))
    return tuple(entries)

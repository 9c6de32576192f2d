"""Version reporting for the symscan CLI."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version


def get_version() -> str:
    """Get the symscan package version string.

    Returns
    -------
    str
        Version string, or "0.0.0-dev" if not installed.
    """
    try:
        return pkg_version("symscan")
    except PackageNotFoundError:
        return "0.0.0-dev"


__all__ = ["get_version"]

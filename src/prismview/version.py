"""Version lookup for prismview."""

from __future__ import annotations

from importlib import metadata


DISTRIBUTION = "prismview"


def get_version() -> str:
    """Return the installed version, ``0.0.0+unknown`` when running from a bare checkout."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__all__ = ["DISTRIBUTION", "get_version"]

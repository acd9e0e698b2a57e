"""String based path helpers valid for POSIX and Windows conventions.

Paths are compared as normalised strings: backslashes become slashes,
redundant separators collapse, ``.`` and ``..`` segments are resolved
against the root, drive letters are kept (upper-cased), and no trailing
slash remains unless the path is a root.
"""

from __future__ import annotations

import posixpath
import re


_DRIVE = re.compile(r"^([A-Za-z]):(?=/|$)")
_SLASHES = re.compile(r"/{2,}")


def _split_drive(path: str) -> tuple[str, str]:
    match = _DRIVE.match(path)
    if match is None:
        return "", path
    return f"{match.group(1).upper()}:", path[match.end() :]


def to_unix(path: str) -> str:
    """Replace backslashes with forward slashes."""
    return path.replace("\\", "/")


def is_absolute(path: str) -> bool:
    """Return whether ``path`` starts at a root or with a drive letter."""
    unix = to_unix(path)
    return unix.startswith("/") or _DRIVE.match(unix) is not None


def normalize_path(path: str) -> str:
    """Return the normalised form of ``path``."""
    drive, rest = _split_drive(to_unix(path).strip())
    rest = _SLASHES.sub("/", rest)
    if not rest:
        return f"{drive}/" if drive else "."
    return f"{drive}{posixpath.normpath(rest)}"


def create_absolute_path(base: str, relative: str) -> str:
    """Resolve ``relative`` against the absolute directory ``base``."""
    if is_absolute(relative):
        return normalize_path(relative)
    return normalize_path(f"{to_unix(base)}/{to_unix(relative)}")


def is_below(path: str, base: str) -> bool:
    """Return whether normalised ``path`` lies strictly below ``base``."""
    path = normalize_path(path)
    base = normalize_path(base)
    if path == base:
        return False
    prefix = base if base.endswith("/") else f"{base}/"
    return path.startswith(prefix)


def relative_to(path: str, base: str) -> str:
    """Return ``path`` relative to ``base``; ``path`` must lie below ``base``."""
    if not is_below(path, base):
        raise ValueError(f"'{path}' is not located below '{base}'")
    base = normalize_path(base)
    prefix = base if base.endswith("/") else f"{base}/"
    return normalize_path(path)[len(prefix) :]


__all__ = [
    "create_absolute_path",
    "is_absolute",
    "is_below",
    "normalize_path",
    "relative_to",
    "to_unix",
]

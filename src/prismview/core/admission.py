"""Admission filter for source code directories.

Build tools report the folders containing their sources; before any file is
served from such a folder the request is checked here. Relative folders are
resolved inside the workspace, folders below the workspace are returned in
their workspace-relative form, and absolute folders elsewhere are only
admitted when an administrator approved them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
from pathlib import Path

from .diagnostics import DiagnosticEmitter
from .exceptions import PatternSyntaxError
from .patterns import DirectoryPattern, compile_pattern, is_pattern
from .paths import create_absolute_path, is_absolute, is_below, normalize_path, relative_to


logger = logging.getLogger(__name__)

UNSPECIFIED = "-"

NOT_APPROVED_MESSAGE = (
    "Removing non-workspace source directory '{path}' - "
    "it has not been approved in Jenkins' global configuration."
)


def _iter_directories(workspace: Path) -> Iterator[Path]:
    for candidate in workspace.rglob("*"):
        # Symbolic links could point anywhere, even outside the workspace.
        if candidate.is_symlink():
            continue
        if candidate.is_dir():
            yield candidate


class SourceDirectoryFilter:
    """Select the requested source directories that may be served."""

    def get_permitted_source_directories(
        self,
        workspace: str,
        approved: Iterable[str],
        requested: Iterable[str],
        log: DiagnosticEmitter,
    ) -> set[str]:
        """Return the subset of ``requested`` directories that are safe to open.

        Args:
            workspace: Absolute path of the workspace.
            approved: Absolute directories approved outside the workspace.
            requested: Relative or absolute directories, or ``glob:`` and
                ``regex:`` patterns evaluated below the workspace.
            log: Receives an error for every dropped directory and malformed
                pattern.

        Returns:
            Absolute directories for approved or relative requests, and
            workspace-relative directories for absolute requests below the
            workspace.
        """
        root = normalize_path(workspace)
        approved_directories = frozenset(normalize_path(path) for path in approved)

        permitted: set[str] = set()
        for raw in requested:
            entry = (raw or "").strip()
            if not entry or entry == UNSPECIFIED:
                continue
            if is_pattern(entry):
                for match in self._expand_pattern(root, entry, log):
                    self._admit(root, approved_directories, match, permitted, log)
            else:
                self._admit(root, approved_directories, entry, permitted, log)
        return permitted

    permit = get_permitted_source_directories

    def _admit(
        self,
        root: str,
        approved: frozenset[str],
        entry: str,
        permitted: set[str],
        log: DiagnosticEmitter,
    ) -> None:
        if not is_absolute(entry):
            resolved = create_absolute_path(root, entry)
            if resolved == root or is_below(resolved, root):
                permitted.add(resolved)
                return
            # Parent references left the workspace: treat like any outside folder.
            entry = resolved

        path = normalize_path(entry)
        if path == root:
            return
        if is_below(path, root):
            permitted.add(relative_to(path, root))
            return
        if path in approved:
            logger.debug("Using approved source directory %s", path)
            permitted.add(path)
            return
        log.error(NOT_APPROVED_MESSAGE.format(path=entry))

    def _expand_pattern(self, root: str, entry: str, log: DiagnosticEmitter) -> list[str]:
        try:
            pattern = compile_pattern(entry)
        except PatternSyntaxError as exc:
            log.error(f"Skipping source directory pattern: {exc}")
            return []

        matches = self._find_directories(root, pattern)
        logger.debug("Pattern %s matched %d directories", entry, len(matches))
        return matches

    def _find_directories(self, root: str, pattern: DirectoryPattern) -> list[str]:
        workspace = Path(root)
        matches: list[str] = []
        try:
            for directory in _iter_directories(workspace):
                relative = directory.relative_to(workspace).as_posix()
                if pattern.matches(relative):
                    matches.append(create_absolute_path(root, relative))
        except OSError as exc:
            logger.warning("Failed to scan workspace %s: %s", root, exc)
        return sorted(matches)


__all__ = ["NOT_APPROVED_MESSAGE", "UNSPECIFIED", "SourceDirectoryFilter"]

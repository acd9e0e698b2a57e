"""Diagnostic sinks used by the renderer, the directory filter, and the CLI.

Core code never prints. It reports problems through a
:class:`DiagnosticEmitter`, and the caller decides whether they end up in
the logs, in memory, or on the terminal.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Sink for warnings, errors, and structured events."""

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Discards everything."""

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Forward diagnostics to a :mod:`logging` logger."""

    def __init__(self, *, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def _log(self, level: int, message: str, exc: BaseException | None) -> None:
        self._logger.log(level, message, exc_info=exc)

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self._log(logging.WARNING, message, exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self._log(logging.ERROR, message, exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        summary = format_event_message(name, payload)
        if summary is None:
            self._logger.debug("diagnostic event %s: %s", name, dict(payload))
        else:
            self._logger.info(summary)


@dataclass(slots=True)
class RecordingEmitter:
    """Keep every diagnostic in memory so callers can report them afterwards."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    events: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a one-line summary for the events worth showing to users."""
    data = dict(payload)
    if name == "page_written":
        return f"Wrote {data.get('path') or '<stdout>'}"
    if name == "directories_permitted":
        count = data.get("count", 0)
        return (
            f"Permitted {count} of {data.get('requested', count)} "
            "requested source directories"
        )
    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "RecordingEmitter",
    "format_event_message",
]

"""Terminal sink for core diagnostics."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prismview.core.diagnostics import DiagnosticEmitter, format_event_message

from .state import CLIState, emit_error, emit_warning, get_cli_state, render_message


class CliEmitter(DiagnosticEmitter):
    """Print warnings and errors on stderr and count the errors.

    Event summaries are only shown with ``--verbose``.
    """

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()
        self.error_count = 0

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.error_count += 1
        emit_error(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        summary = format_event_message(name, payload)
        if summary and self._state.verbosity >= 1:
            render_message("info", summary)


__all__ = ["CliEmitter"]

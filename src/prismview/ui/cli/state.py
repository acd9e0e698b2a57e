"""Per-invocation CLI state: verbosity, tracebacks, and consoles."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import IO, TYPE_CHECKING, Any

import click

from prismview.core.exceptions import exception_messages


if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]

_LEVEL_STYLES = {"warning": "yellow", "error": "red"}


def _bind_console(console: Console | None, stream: IO[str], **options: Any) -> Console:
    # Test runners swap sys.stdout/sys.stderr between invocations.
    if console is not None and getattr(console, "file", None) is stream:
        return console
    from rich.console import Console

    return Console(file=stream, **options)


@dataclass(slots=True)
class CLIState:
    """Options shared by every command of one CLI invocation."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _console: Console | None = field(default=None, init=False, repr=False)
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def console(self) -> Console:
        """Console writing command output to stdout."""
        self._console = _bind_console(self._console, sys.stdout)
        return self._console

    @property
    def err_console(self) -> Console:
        """Console writing diagnostics to stderr."""
        self._err_console = _bind_console(self._err_console, sys.stderr, highlight=False)
        return self._err_console


_CURRENT_STATE: ContextVar[CLIState | None] = ContextVar("prismview_cli_state", default=None)


def get_cli_state(ctx: click.Context | None = None, *, create: bool = True) -> CLIState:
    """Return the state bound to ``ctx`` (or the active click context).

    Outside of a click invocation the last state seen in this context is
    reused. With ``create=False`` a missing state raises ``RuntimeError``.
    """
    ctx = ctx or click.get_current_context(silent=True)
    state = ctx.find_object(CLIState) if ctx is not None else None
    if state is None and ctx is not None and create:
        state = CLIState()
        ctx.obj = state
    if state is None:
        state = _CURRENT_STATE.get()
    if state is None:
        if not create:
            raise RuntimeError("CLI state is not initialised for this context.")
        state = CLIState()
    _CURRENT_STATE.set(state)
    return state


def set_cli_state(
    *,
    ctx: click.Context | None = None,
    verbosity: int | None = None,
    debug: bool | None = None,
) -> CLIState:
    state = get_cli_state(ctx)
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Write ``message`` to stderr; verbose runs add the exception details."""
    state = get_cli_state()
    if level not in _LEVEL_STYLES:
        state.err_console.log(message, markup=False)
        return

    from rich.text import Text

    style = _LEVEL_STYLES[level]
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))

    if exception is not None and state.verbosity >= 1:
        details = [f"type: {type(exception).__name__}"]
        causes = [line for line in exception_messages(exception) if line not in message]
        if state.verbosity < 2:
            causes = causes[:1]
        details.extend(f"  {line}" for line in causes)
        text.append("\n" + "\n".join(details), style=style)

    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    render_message("warning", message, exception=exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    render_message("error", message, exception=exception)


def debug_enabled() -> bool:
    """Return whether unexpected errors should show full tracebacks."""
    try:
        return get_cli_state(create=False).show_tracebacks
    except RuntimeError:
        return False

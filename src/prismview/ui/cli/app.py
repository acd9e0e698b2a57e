"""Typer application wiring for the prismview CLI."""

from __future__ import annotations

from rich.traceback import Traceback
import typer

from prismview.core.exceptions import exception_hint
from prismview.version import get_version

from .commands import permit, render, themes
from .state import debug_enabled, emit_error, get_cli_state, set_cli_state


app = typer.Typer(
    help="Render source files with highlighted markers and check source directories.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
    invoke_without_command=True,
)


@app.callback()
def _app_root(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the prismview version and exit.",
        is_eager=True,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        help="Show full tracebacks when an unexpected error occurs.",
    ),
) -> None:
    ctx.obj = get_cli_state()
    set_cli_state(verbosity=verbose, debug=debug)

    if version:
        typer.echo(get_version())
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


app.command(name="render")(render)
app.command(name="permit")(permit)
app.command(name="themes")(themes)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(exception_hint(exc) or repr(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]

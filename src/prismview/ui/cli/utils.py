"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer

from prismview.core.config import Configuration, load_configuration
from prismview.core.exceptions import ConfigurationError

from .state import emit_error


def load_cli_configuration(path: Path | None) -> Configuration:
    """Load the configuration, turning failures into a CLI exit."""
    try:
        return load_configuration(path)
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


def write_output_file(target: Path, payload: str) -> None:
    """Persist ``payload`` to ``target``, creating parent directories."""
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(payload, encoding="utf-8")
    except OSError as exc:
        emit_error(f"Failed to write output file '{target}'", exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["load_cli_configuration", "write_output_file"]

"""Implementation of the ``prismview permit`` command."""

from __future__ import annotations

import typer

from prismview.core.admission import SourceDirectoryFilter

from .._options import (
    ApprovedOption,
    ConfigOption,
    RequestedPathsArgument,
    StrictOption,
    WorkspaceArgument,
)
from ..diagnostics import CliEmitter
from ..utils import load_cli_configuration


def permit(
    workspace: WorkspaceArgument,
    directories: RequestedPathsArgument = None,
    approved: ApprovedOption = None,
    strict: StrictOption = False,
    config: ConfigOption = None,
) -> None:
    """Print the requested source directories that may be served."""
    configuration = load_cli_configuration(config)
    approved_directories = set(configuration.permitted_directories())
    approved_directories.update(approved or [])

    requested = list(directories or [])
    emitter = CliEmitter()
    permitted = SourceDirectoryFilter().get_permitted_source_directories(
        workspace, approved_directories, requested, emitter
    )

    for directory in sorted(permitted):
        typer.echo(directory)

    emitter.event("directories_permitted", {"count": len(permitted), "requested": len(requested)})
    if strict and emitter.error_count:
        raise typer.Exit(code=1)


__all__ = ["permit"]

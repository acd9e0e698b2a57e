"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
MARKER_PANEL = "Marker"
OUTPUT_PANEL = "Output"
CONFIG_PANEL = "Configuration"

SourceArgument = Annotated[
    Path,
    typer.Argument(
        metavar="SOURCE",
        help="Source file to render.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

WorkspaceArgument = Annotated[
    str,
    typer.Argument(
        metavar="WORKSPACE",
        help="Absolute path of the workspace that relative directories resolve against.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

RequestedPathsArgument = Annotated[
    list[str] | None,
    typer.Argument(
        metavar="DIRECTORY...",
        help=(
            "Requested source directories: relative or absolute paths, or patterns "
            "prefixed with 'glob:' or 'regex:'."
        ),
        rich_help_panel=INPUTS_PANEL,
    ),
]

LineStartOption = Annotated[
    int,
    typer.Option(
        "--line-start",
        "-l",
        min=0,
        help="First marked line (1-based, 0 disables the marker).",
        rich_help_panel=MARKER_PANEL,
    ),
]

LineEndOption = Annotated[
    int,
    typer.Option(
        "--line-end",
        min=0,
        help="Last marked line; defaults to the first marked line.",
        rich_help_panel=MARKER_PANEL,
    ),
]

ColumnStartOption = Annotated[
    int,
    typer.Option(
        "--column-start",
        min=0,
        help="First marked column of a single-line marker (1-based).",
        rich_help_panel=MARKER_PANEL,
    ),
]

ColumnEndOption = Annotated[
    int,
    typer.Option(
        "--column-end",
        min=0,
        help="Last marked column; 0 marks up to the end of the line.",
        rich_help_panel=MARKER_PANEL,
    ),
]

TitleOption = Annotated[
    str,
    typer.Option("--title", help="Title shown above the marked lines.", rich_help_panel=MARKER_PANEL),
]

DescriptionOption = Annotated[
    str,
    typer.Option(
        "--description",
        help="Collapsible description shown below the title.",
        rich_help_panel=MARKER_PANEL,
    ),
]

IconOption = Annotated[
    str,
    typer.Option("--icon", help="Icon reference shown next to the title.", rich_help_panel=MARKER_PANEL),
]

IconRootOption = Annotated[
    str | None,
    typer.Option(
        "--icon-root",
        help="Base URL prepended to relative icon references.",
        rich_help_panel=MARKER_PANEL,
    ),
]

ThemeOption = Annotated[
    str | None,
    typer.Option(
        "--theme",
        help="Prism theme overriding the configured one (see 'prismview themes').",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

FragmentOption = Annotated[
    bool,
    typer.Option(
        "--fragment",
        help="Emit only the HTML fragment instead of a standalone page.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the result to this file instead of stdout.",
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

AssetRootOption = Annotated[
    str,
    typer.Option(
        "--asset-root",
        help="URL prefix of the Prism stylesheets and script in standalone pages.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ApprovedOption = Annotated[
    list[str] | None,
    typer.Option(
        "--approved",
        "-a",
        help="Additional approved absolute directory; repeat for several.",
        rich_help_panel=CONFIG_PANEL,
    ),
]

StrictOption = Annotated[
    bool,
    typer.Option(
        "--strict",
        help="Exit with status 1 when a requested directory was dropped.",
        rich_help_panel=CONFIG_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Configuration file (defaults to $PRISMVIEW_CONFIG or ~/.prismview/config.yml).",
        dir_okay=False,
        rich_help_panel=CONFIG_PANEL,
    ),
]

"""Implementation of the ``prismview render`` command."""

from __future__ import annotations

import typer

from prismview.core.config import PrismTheme
from prismview.core.marker import MarkerBuilder
from prismview.core.printer import SourcePrinter
from prismview.core.resolvers import PassthroughImageResolver, PrefixImageResolver
from prismview.core.view import SourceCodeView

from .._options import (
    AssetRootOption,
    ColumnEndOption,
    ColumnStartOption,
    ConfigOption,
    DescriptionOption,
    FragmentOption,
    IconOption,
    IconRootOption,
    LineEndOption,
    LineStartOption,
    OutputPathOption,
    SourceArgument,
    ThemeOption,
    TitleOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error
from ..utils import load_cli_configuration, write_output_file


def render(
    source: SourceArgument,
    line_start: LineStartOption = 0,
    line_end: LineEndOption = 0,
    column_start: ColumnStartOption = 0,
    column_end: ColumnEndOption = 0,
    title: TitleOption = "",
    description: DescriptionOption = "",
    icon: IconOption = "",
    icon_root: IconRootOption = None,
    theme: ThemeOption = None,
    fragment: FragmentOption = False,
    output: OutputPathOption = None,
    asset_root: AssetRootOption = ".",
    config: ConfigOption = None,
) -> None:
    """Render a source file as HTML with an optional highlighted marker."""
    configuration = load_cli_configuration(config)
    if theme:
        try:
            configuration = configuration.with_theme(theme)
        except ValueError as exc:
            choices = ", ".join(name for name, _ in PrismTheme.items())
            emit_error(f"Unknown theme '{theme}', expected one of: {choices}", exception=exc)
            raise typer.Exit(code=1) from exc

    marker = (
        MarkerBuilder()
        .with_line_start(line_start)
        .with_line_end(line_end)
        .with_column_start(column_start)
        .with_column_end(column_end)
        .with_title(title)
        .with_description(description)
        .with_icon(icon)
        .build()
    )
    resolver = PrefixImageResolver(icon_root) if icon_root else PassthroughImageResolver()
    printer = SourcePrinter(resolver)

    with source.open(encoding="utf-8") as reader:
        view = SourceCodeView(
            source.name, reader, marker, printer=printer, configuration=configuration
        )

    emitter = CliEmitter()
    if not view.is_html:
        emitter.warning(f"Unable to read '{source}'; the error is shown instead of the source.")

    payload = view.source_code if fragment else view.render_page(asset_root=asset_root)
    if output is None:
        typer.echo(payload)
        return

    write_output_file(output, payload)
    emitter.event("page_written", {"path": str(output)})


__all__ = ["render"]

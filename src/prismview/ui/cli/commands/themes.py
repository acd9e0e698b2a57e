"""Implementation of the ``prismview themes`` command."""

from __future__ import annotations

from rich import box
from rich.table import Table

from prismview.core.config import PrismTheme

from .._options import ConfigOption
from ..state import get_cli_state
from ..utils import load_cli_configuration


def themes(config: ConfigOption = None) -> None:
    """List the available Prism themes, marking the configured one."""
    configuration = load_cli_configuration(config)

    table = Table(
        title="Prism Themes",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Name", style="magenta", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Stylesheet", no_wrap=True)
    table.add_column("Active", justify="center")

    for theme in PrismTheme:
        active = "*" if theme is configuration.theme else ""
        table.add_row(theme.name, theme.title, theme.file_name, active)

    get_cli_state().console.print(table)


__all__ = ["themes"]

"""Source code view combining a reader, a marker, and the configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import Configuration, ConfigurationSnapshot, PrismTheme
from .languages import base_name
from .marker import Marker
from .printer import SourcePrinter


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
PAGE_TEMPLATE = "source-view.html.j2"


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(enabled_extensions=("html", "j2"), default=True),
        keep_trailing_newline=True,
    )


class SourceCodeView:
    """Render a source file once and expose it for a page.

    Args:
        file_name: Name of the shown file, used as title and for language
            detection.
        reader: Text stream with the source code. It belongs to the caller
            and is consumed but not closed.
        marker: Region to highlight.
        printer: Renderer to use, a plain :class:`SourcePrinter` by default.
        configuration: Configuration or snapshot supplying the theme.
    """

    def __init__(
        self,
        file_name: str,
        reader: TextIO,
        marker: Marker,
        *,
        printer: SourcePrinter | None = None,
        configuration: Configuration | ConfigurationSnapshot | None = None,
    ) -> None:
        if isinstance(configuration, Configuration):
            configuration = configuration.snapshot()
        self._configuration = configuration or Configuration().snapshot()
        self._file_name = file_name
        self._source_code = (printer or SourcePrinter()).render(file_name, reader, marker)

    @property
    def display_name(self) -> str:
        return base_name(self._file_name) or self._file_name

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def source_code(self) -> str:
        """Return the rendered HTML, or the error text when reading failed."""
        return self._source_code

    @property
    def is_html(self) -> bool:
        return self._source_code.startswith("<pre>")

    @property
    def configuration(self) -> ConfigurationSnapshot:
        return self._configuration

    @property
    def theme(self) -> PrismTheme:
        return self._configuration.theme

    def render_page(self, *, asset_root: str = ".") -> str:
        """Return a standalone HTML document showing the source code."""
        template = _environment().get_template(PAGE_TEMPLATE)
        return template.render(
            title=self.display_name,
            theme=self.theme,
            asset_root=asset_root.rstrip("/"),
            source_code=self._source_code,
            is_html=self.is_html,
        )


__all__ = ["PAGE_TEMPLATE", "SourceCodeView"]

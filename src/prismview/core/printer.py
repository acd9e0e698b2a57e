"""HTML rendering of source files with an optional marker overlay.

The printer produces a ``<pre>`` element holding one to three ``<code>``
blocks understood by the Prism highlighter running in the browser:

* without a marker, a single block with the whole file;
* with a marker, the lines before the marker, the marked lines (with the
  ``highlight`` class), and the lines after the marker. A panel with the
  marker title, description, and icon is placed right above the marked
  block.

Every character of the source is escaped. Titles and descriptions go
through :func:`prismview.core.sanitizer.sanitize_message`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from html import escape
from itertools import islice
import logging
import traceback
import uuid

from .columns import ColumnMarker
from .languages import language_for
from .marker import Marker
from .resolvers import ImageResolver, PassthroughImageResolver
from .sanitizer import sanitize_message


logger = logging.getLogger(__name__)

CODE_MARK_OPEN = '<span class="code-mark">'
CODE_MARK_CLOSE = "</span>"


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def _escaped(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield escape(_strip_eol(line), quote=True)


def code_block(content: str, language: str, *, highlight: bool = False) -> str:
    """Wrap already escaped ``content`` in a Prism ``<code>`` element."""
    classes = [f"language-{language}", "line-numbers"]
    if highlight:
        classes.append("highlight")
    classes.append("match-braces")
    return f'<code class="{" ".join(classes)}">{content}</code>'


class SourcePrinter:
    """Render source code as HTML for the Prism client-side highlighter."""

    def __init__(self, image_resolver: ImageResolver | None = None) -> None:
        self._image_resolver = image_resolver or PassthroughImageResolver()

    def render(self, file_name: str, lines: Iterable[str], marker: Marker) -> str:
        """Return the HTML fragment for ``lines`` with ``marker`` applied.

        ``lines`` is consumed once. When reading it fails, the error message
        and its traceback are returned as plain text instead of HTML.
        """
        try:
            return self._render(file_name, iter(lines), marker)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Failed to read source file %s", file_name, exc_info=exc)
            return f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"

    def _render(self, file_name: str, lines: Iterator[str], marker: Marker) -> str:
        language = language_for(file_name)
        if not marker.has_marker:
            source = "\n".join(_escaped(lines))
            return f"<pre>{code_block(source, language)}</pre>"

        before = "".join(f"{line}\n" for line in _escaped(islice(lines, marker.line_start - 1)))
        marked_lines = [
            _strip_eol(line) for line in islice(lines, marker.line_end - marker.line_start + 1)
        ]
        marked = self._mark(marked_lines, marker)

        parts = [
            "<pre>",
            code_block(before, language),
            self.info_panel(marker),
            code_block(marked, language, highlight=True),
            code_block("".join(f"{line}\n" for line in _escaped(lines)), language),
            "</pre>",
        ]
        return "".join(parts)

    def _mark(self, lines: list[str], marker: Marker) -> str:
        if not (marker.has_columns and lines):
            return "".join(f"{line}\n" for line in _escaped(lines))

        column_marker = ColumnMarker(uuid.uuid4().hex)
        tokenized = column_marker.mark_columns(lines[0], marker.column_start, marker.column_end)
        line = column_marker.replace_tokens(
            escape(tokenized, quote=True), CODE_MARK_OPEN, CODE_MARK_CLOSE
        )
        return f"{line}\n"

    def info_panel(self, marker: Marker) -> str:
        """Return the title panel shown above the marked lines."""
        icon_cell = ""
        if marker.icon:
            url = escape(self._image_resolver.image_path(marker.icon), quote=True)
            icon_cell = f'<td><img src="{url}" class="icon-md"></td>'

        title = sanitize_message(marker.title)
        panel = [
            '<div class="analysis-warning">',
            '<table class="analysis-panel">',
            f'<tr class="analysis-title">{icon_cell}'
            f'<td class="analysis-warning-title">{title}</td></tr>',
            "</table>",
        ]
        if marker.description.strip():
            panel.append(
                '<details class="collapse-panel">'
                '<summary class="analysis-collapse-button">Details</summary>'
                f'<div class="analysis-detail">{sanitize_message(marker.description)}</div>'
                "</details>"
            )
        panel.append("</div>")
        return "".join(panel)


__all__ = ["CODE_MARK_CLOSE", "CODE_MARK_OPEN", "SourcePrinter", "code_block"]

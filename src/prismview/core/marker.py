"""Marker values describing the highlighted region of a source file.

A marker selects either nothing (``line_start == 0``), a single line,
a column range within a single line, or a block of lines. The title,
description, and icon are presented in a panel next to the marked code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Marker:
    """Immutable region of interest within a source file."""

    line_start: int = 0
    line_end: int = 0
    column_start: int = 0
    column_end: int = 0
    title: str = ""
    description: str = ""
    icon: str = ""

    def __post_init__(self) -> None:
        for name in ("line_start", "line_end", "column_start", "column_end"):
            if getattr(self, name) < 0:
                object.__setattr__(self, name, 0)
        if self.line_end < self.line_start:
            object.__setattr__(self, "line_end", self.line_start)

    @property
    def has_marker(self) -> bool:
        """Return whether any line is marked."""
        return self.line_start > 0

    @property
    def is_single_line(self) -> bool:
        return self.has_marker and self.line_start == self.line_end

    @property
    def has_columns(self) -> bool:
        """Return whether the marker narrows a single line down to columns."""
        return self.is_single_line and self.column_start > 0


class MarkerBuilder:
    """Fluent builder for :class:`Marker` instances.

    Repeated setters overwrite previous values. Normalisation happens in
    ``build`` so the order of the setters does not matter, and ``build``
    leaves the builder untouched so it can be reused for similar markers.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, **changes: Any) -> MarkerBuilder:
        self._values.update(changes)
        return self

    def with_line_start(self, line_start: int) -> MarkerBuilder:
        return self._set(line_start=line_start)

    def with_line_end(self, line_end: int) -> MarkerBuilder:
        return self._set(line_end=line_end)

    def with_column_start(self, column_start: int) -> MarkerBuilder:
        return self._set(column_start=column_start)

    def with_column_end(self, column_end: int) -> MarkerBuilder:
        return self._set(column_end=column_end)

    def with_title(self, title: str | None) -> MarkerBuilder:
        return self._set(title=title or "")

    def with_description(self, description: str | None) -> MarkerBuilder:
        return self._set(description=description or "")

    def with_icon(self, icon: str | None) -> MarkerBuilder:
        return self._set(icon=icon or "")

    def build(self) -> Marker:
        """Return a normalised marker for the current builder values."""
        return Marker(**self._values)


__all__ = ["Marker", "MarkerBuilder"]

"""CLI command implementations."""

from __future__ import annotations

from .permit import permit
from .render import render
from .themes import themes


__all__ = ["permit", "render", "themes"]

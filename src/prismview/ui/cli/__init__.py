"""Public CLI exports for prismview."""

from __future__ import annotations

from .app import app, main
from .commands import permit, render, themes
from .state import debug_enabled, emit_error, emit_warning, get_cli_state


__all__ = [
    "app",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "main",
    "permit",
    "render",
    "themes",
]

"""Core rendering and admission logic of the source viewer."""

from __future__ import annotations

from .admission import NOT_APPROVED_MESSAGE, SourceDirectoryFilter
from .columns import ColumnMarker
from .config import (
    Configuration,
    ConfigurationSnapshot,
    PermittedSourceDirectory,
    PrismTheme,
    load_configuration,
    save_configuration,
)
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter, RecordingEmitter
from .exceptions import ConfigurationError, PatternSyntaxError, PrismViewError
from .languages import language_for
from .marker import Marker, MarkerBuilder
from .printer import SourcePrinter
from .resolvers import ImageResolver, PassthroughImageResolver, PrefixImageResolver
from .sanitizer import sanitize_html
from .view import SourceCodeView


__all__ = [
    "NOT_APPROVED_MESSAGE",
    "ColumnMarker",
    "Configuration",
    "ConfigurationError",
    "ConfigurationSnapshot",
    "DiagnosticEmitter",
    "ImageResolver",
    "LoggingEmitter",
    "Marker",
    "MarkerBuilder",
    "NullEmitter",
    "PassthroughImageResolver",
    "PatternSyntaxError",
    "PermittedSourceDirectory",
    "PrefixImageResolver",
    "PrismTheme",
    "PrismViewError",
    "RecordingEmitter",
    "SourceCodeView",
    "SourceDirectoryFilter",
    "SourcePrinter",
    "language_for",
    "load_configuration",
    "sanitize_html",
    "save_configuration",
]

"""Primary public API for prismview."""

from __future__ import annotations

from prismview.core import (
    NOT_APPROVED_MESSAGE,
    ColumnMarker,
    Configuration,
    ConfigurationError,
    ConfigurationSnapshot,
    DiagnosticEmitter,
    ImageResolver,
    LoggingEmitter,
    Marker,
    MarkerBuilder,
    NullEmitter,
    PassthroughImageResolver,
    PatternSyntaxError,
    PermittedSourceDirectory,
    PrefixImageResolver,
    PrismTheme,
    PrismViewError,
    RecordingEmitter,
    SourceCodeView,
    SourceDirectoryFilter,
    SourcePrinter,
    language_for,
    load_configuration,
    sanitize_html,
    save_configuration,
)
from prismview.version import get_version


__version__ = get_version()

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
    "__version__",
    "get_version",
    "language_for",
    "load_configuration",
    "sanitize_html",
    "save_configuration",
]

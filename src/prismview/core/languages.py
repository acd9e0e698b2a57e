"""Language detection for the client-side Prism highlighter."""

from __future__ import annotations

from functools import lru_cache
import re

from pygments.lexers import find_lexer_class_for_filename


NO_LANGUAGE = "none"

_EXTENSIONS: dict[str, str] = {
    "c": "clike",
    "cpp": "clike",
    "cc": "clike",
    "h": "clike",
    "hpp": "clike",
    "cxx": "clike",
    "java": "java",
    "xml": "markup",
    "html": "markup",
    "jelly": "markup",
    "js": "javascript",
    "py": "python",
}

# Prism language identifiers that also appear as Pygments lexer aliases.
_PRISM_LANGUAGES = frozenset(
    {
        "bash",
        "csharp",
        "css",
        "dart",
        "docker",
        "go",
        "groovy",
        "haskell",
        "ini",
        "json",
        "kotlin",
        "lua",
        "markdown",
        "perl",
        "php",
        "powershell",
        "r",
        "ruby",
        "rust",
        "scala",
        "sql",
        "swift",
        "toml",
        "typescript",
        "yaml",
    }
)

_SEPARATORS = re.compile(r"[\\/]")


def base_name(file_name: str) -> str:
    """Return the last segment of a path written in either convention."""
    return _SEPARATORS.split(file_name)[-1]


def extension_of(file_name: str) -> str:
    """Return the lower-cased extension of ``file_name`` without the dot."""
    name = base_name(file_name)
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


@lru_cache(maxsize=256)
def _guess_from_pygments(name: str) -> str:
    lexer = find_lexer_class_for_filename(name)
    if lexer is None:
        return NO_LANGUAGE
    for alias in lexer.aliases:
        if alias in _PRISM_LANGUAGES:
            return alias
    return NO_LANGUAGE


def language_for(file_name: str) -> str:
    """Return the ``language-*`` suffix to use for ``file_name``.

    The fixed extension table takes precedence; other extensions are looked
    up through Pygments and kept only when Prism knows the language.
    """
    extension = extension_of(file_name)
    if not extension:
        return NO_LANGUAGE
    if extension in _EXTENSIONS:
        return _EXTENSIONS[extension]
    return _guess_from_pygments(base_name(file_name).lower())


__all__ = ["NO_LANGUAGE", "base_name", "extension_of", "language_for"]

"""Whitelist sanitiser applied to marker titles and descriptions."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction, Tag
from bs4.formatter import HTMLFormatter


ALLOWED_TAGS = frozenset({"b", "i", "em", "strong", "code", "br"})

# Elements whose content must never reach the page, not even as text.
DROPPED_TAGS = frozenset(
    {"script", "style", "iframe", "object", "embed", "noscript", "template", "head", "title"}
)

_HIDDEN_NODES = (CData, Comment, Declaration, Doctype, ProcessingInstruction)
_NEWLINES = re.compile(r"\r\n|\r|\n")

# Minimal escaping, void elements written as `<br>`.
_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml, void_element_close_prefix=None
)


def _clean(node: Tag) -> None:
    for child in list(node.children):
        if isinstance(child, _HIDDEN_NODES):
            child.extract()
            continue
        if not isinstance(child, Tag):
            continue
        name = (child.name or "").lower()
        if name in DROPPED_TAGS:
            child.decompose()
            continue
        _clean(child)
        if name in ALLOWED_TAGS:
            child.attrs = {}
        else:
            child.unwrap()


def sanitize_html(markup: str) -> str:
    """Return ``markup`` reduced to a small set of attribute-free inline tags.

    Unknown tags are unwrapped so their text survives (escaped), while
    scripts, styles, and embedded objects are removed with their content.
    """
    if not markup:
        return ""
    soup = BeautifulSoup(markup, "html.parser")
    _clean(soup)
    return soup.decode(formatter=_FORMATTER)


def newlines_to_breaks(text: str) -> str:
    """Replace every line break in ``text`` with a ``<br>`` element."""
    return _NEWLINES.sub("<br>", text)


def sanitize_message(text: str) -> str:
    """Prepare a marker title or description for inclusion in the page."""
    return sanitize_html(newlines_to_breaks(text or ""))


__all__ = [
    "ALLOWED_TAGS",
    "DROPPED_TAGS",
    "newlines_to_breaks",
    "sanitize_html",
    "sanitize_message",
]

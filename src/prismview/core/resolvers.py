"""Icon reference resolution used by the source printer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable
from urllib.parse import urlparse


@runtime_checkable
class ImageResolver(Protocol):
    """Capability mapping an abstract icon reference to a URL."""

    def image_path(self, reference: str) -> str: ...


class PassthroughImageResolver:
    """Resolver returning icon references unchanged."""

    def image_path(self, reference: str) -> str:
        return reference


@dataclass(frozen=True, slots=True)
class PrefixImageResolver:
    """Resolve relative icon references below a base URL.

    Absolute URLs (with a scheme) are returned untouched.
    """

    base_url: str

    def image_path(self, reference: str) -> str:
        if urlparse(reference).scheme:
            return reference
        base = self.base_url.rstrip("/")
        return f"{base}/{reference.lstrip('/')}"


__all__ = ["ImageResolver", "PassthroughImageResolver", "PrefixImageResolver"]

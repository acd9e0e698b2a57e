"""Custom exception hierarchy for the source viewer."""

from __future__ import annotations

from collections.abc import Iterator


class PrismViewError(RuntimeError):
    """Base exception for source viewer failures."""


class PatternSyntaxError(PrismViewError, ValueError):
    """Raised when a ``glob:`` or ``regex:`` directory pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern '{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


class ConfigurationError(PrismViewError):
    """Raised when a configuration file cannot be read or validated."""


def _chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def exception_messages(exc: BaseException) -> list[str]:
    """Return the first line of every message along the cause chain of ``exc``.

    Exceptions without a message are skipped; the outermost one comes first.
    """
    lines = (str(error).strip().partition("\n")[0].strip() for error in _chain(exc))
    return [line for line in lines if line]


def exception_hint(exc: BaseException) -> str | None:
    """Return the innermost message of the chain, usually the root cause."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "ConfigurationError",
    "PatternSyntaxError",
    "PrismViewError",
    "exception_hint",
    "exception_messages",
]

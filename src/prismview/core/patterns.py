"""Compilation of ``glob:`` and ``regex:`` directory patterns.

Patterns are matched against workspace-relative paths written with forward
slashes and must match the whole path.

Glob syntax:

`*`
: Any number of characters within a single path segment.

`**`
: Any number of characters across segments. Followed by a slash (``**/``),
  it also matches zero segments, so ``**/src`` matches ``src`` and
  ``a/b/src``.

`?`
: Exactly one character other than a slash.

`[abc]`, `[a-z]`, `[!abc]`
: One character from (or, with ``!``, not from) the set.

`{a,b}`
: One of the comma separated alternatives; groups do not nest.

`\\`
: Escapes the next character.

Regex patterns use the Python :mod:`re` syntax.

The glob dialect is the one of Java's ``FileSystem.getPathMatcher``, brace
groups included. Neither :mod:`fnmatch` nor ``Path.glob`` understands
braces or whole-path matching, so globs are translated to regular
expressions and the workspace walk only tests each directory against them.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from .exceptions import PatternSyntaxError


GLOB_PREFIX = "glob:"
REGEX_PREFIX = "regex:"


def is_pattern(value: str) -> bool:
    """Return whether ``value`` carries a pattern prefix."""
    return value.startswith((GLOB_PREFIX, REGEX_PREFIX))


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    index = start + 1
    negate = index < len(pattern) and pattern[index] == "!"
    if negate:
        index += 1
    body_start = index
    # A closing bracket right after the opening one is a literal member.
    if index < len(pattern) and pattern[index] == "]":
        index += 1
    end = pattern.find("]", index)
    if end < 0:
        raise PatternSyntaxError(pattern, f"unterminated character class at index {start}")
    members = "".join(
        "-" if char == "-" else re.escape(char) for char in pattern[body_start:end]
    )
    return f"(?=[^/])[{'^' if negate else ''}{members}]", end + 1


def glob_to_regex(pattern: str) -> str:
    """Translate a glob ``pattern`` into an equivalent regular expression."""
    output: list[str] = []
    in_group = False
    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "*":
            if pattern.startswith("**", index):
                index += 2
                if index < length and pattern[index] == "/":
                    output.append("(?:.*/)?")
                    index += 1
                else:
                    output.append(".*")
                continue
            output.append("[^/]*")
        elif char == "?":
            output.append("[^/]")
        elif char == "[":
            translated, index = _translate_class(pattern, index)
            output.append(translated)
            continue
        elif char == "{":
            if in_group:
                raise PatternSyntaxError(pattern, f"nested group at index {index}")
            in_group = True
            output.append("(?:")
        elif char == "}" and in_group:
            in_group = False
            output.append(")")
        elif char == "," and in_group:
            output.append("|")
        elif char == "\\":
            if index + 1 >= length:
                raise PatternSyntaxError(pattern, "dangling escape at end of pattern")
            output.append(re.escape(pattern[index + 1]))
            index += 2
            continue
        else:
            output.append(re.escape(char))
        index += 1

    if in_group:
        raise PatternSyntaxError(pattern, "unterminated group")
    return "".join(output)


@dataclass(frozen=True, slots=True)
class DirectoryPattern:
    """A compiled directory pattern."""

    source: str
    regex: re.Pattern[str]

    def matches(self, relative_path: str) -> bool:
        return self.regex.fullmatch(relative_path) is not None


def compile_pattern(value: str) -> DirectoryPattern:
    """Compile a prefixed pattern such as ``glob:**/src`` or ``regex:.*/src``."""
    if value.startswith(GLOB_PREFIX):
        expression = glob_to_regex(value[len(GLOB_PREFIX) :])
    elif value.startswith(REGEX_PREFIX):
        expression = value[len(REGEX_PREFIX) :]
    else:
        raise PatternSyntaxError(value, "missing 'glob:' or 'regex:' prefix")

    try:
        regex = re.compile(expression)
    except re.error as exc:
        raise PatternSyntaxError(value, str(exc)) from exc
    return DirectoryPattern(source=value, regex=regex)


__all__ = [
    "GLOB_PREFIX",
    "REGEX_PREFIX",
    "DirectoryPattern",
    "compile_pattern",
    "glob_to_regex",
    "is_pattern",
]

"""Shell-glob include patterns for ``-P``.

Patterns match a single entry name with ``fnmatch`` wildcards (``*``, ``?``,
``[...]`` with ``!`` or ``^`` negation). ``{a,b}`` expands to alternatives and
``\\`` escapes the next character. Matching is case-sensitive.
"""

from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass

from ..errors import ConfigError


@dataclass(frozen=True)
class IncludePattern:
    """Compiled include pattern."""

    raw: str
    regex: re.Pattern[str]

    def matches(self, name: str) -> bool:
        """Return whether ``name`` matches any alternative."""
        return self.regex.match(name) is not None


def _invalid(raw: str, reason: str) -> ConfigError:
    return ConfigError(f"invalid pattern {raw!r}: {reason}")


def _literal(char: str) -> str:
    """Return ``char`` in a form ``fnmatch`` reads literally."""
    if char in "*?[":
        return f"[{char}]"
    return char


def _check_ranges(raw: str, body: str) -> None:
    index = 0
    while index < len(body):
        if index + 2 < len(body) and body[index + 1] == "-" and body[index] > body[index + 2]:
            raise _invalid(raw, f"invalid range {body[index:index + 3]!r}")
        index += 3 if index + 2 < len(body) and body[index + 1] == "-" else 1


def _read_atom(raw: str, index: int) -> tuple[str, int]:
    """Read one escape, character class, or plain character as ``fnmatch`` text."""
    char = raw[index]
    if char == "\\":
        if index + 1 >= len(raw):
            raise _invalid(raw, "dangling escape")
        return _literal(raw[index + 1]), index + 2
    if char != "[":
        return char, index + 1

    end = index + 1
    negate = end < len(raw) and raw[end] in "!^"
    if negate:
        end += 1
    body_start = end
    if end < len(raw) and raw[end] == "]":
        end += 1
    end = raw.find("]", end)
    if end < 0:
        raise _invalid(raw, "unclosed character class")
    body = raw[body_start:end]
    _check_ranges(raw, body)
    return ("[!" if negate else "[") + body + "]", end + 1


def _read_alternates(raw: str, index: int) -> tuple[list[str], int]:
    """Read the ``{a,b}`` group opening at ``index``."""
    members: list[str] = []
    current: list[str] = []
    index += 1
    while True:
        if index >= len(raw):
            raise _invalid(raw, "unclosed alternate group")
        char = raw[index]
        if char == "{":
            raise _invalid(raw, "nested alternate groups are not allowed")
        if char == "}":
            members.append("".join(current))
            return members, index + 1
        if char == ",":
            members.append("".join(current))
            current = []
            index += 1
            continue
        text, index = _read_atom(raw, index)
        current.append(text)


def expand_pattern(raw: str) -> list[str]:
    """Expand ``raw`` into the plain ``fnmatch`` patterns it stands for."""
    if not raw:
        raise _invalid(raw, "empty pattern")
    expanded = [""]
    index = 0
    while index < len(raw):
        char = raw[index]
        if char == "{":
            members, index = _read_alternates(raw, index)
            expanded = [prefix + member for prefix in expanded for member in members]
            continue
        if char == "}":
            raise _invalid(raw, "unopened alternate group")
        text, index = _read_atom(raw, index)
        expanded = [prefix + text for prefix in expanded]
    return list(dict.fromkeys(expanded))


def compile_include_pattern(raw: str) -> IncludePattern:
    """Compile ``raw`` or raise ``ConfigError`` describing why it is invalid."""
    translated = "|".join(fnmatch.translate(pattern) for pattern in expand_pattern(raw))
    try:
        regex = re.compile(translated)
    except re.error as exc:
        raise _invalid(raw, str(exc)) from exc
    return IncludePattern(raw=raw, regex=regex)


__all__ = [
    "IncludePattern",
    "compile_include_pattern",
    "expand_pattern",
]

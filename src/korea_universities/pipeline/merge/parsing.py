"""Split raw accreditation names into a base name and a bracketed condition."""

from __future__ import annotations

from typing import NamedTuple, Optional


class ParsedTarget(NamedTuple):
    name: str
    condition: Optional[str]


def _last_group_start(text: str) -> int:
    """Return the index of the ``(`` opening the group that closes *text*.

    Returns ``-1`` when the trailing ``)`` has no balanced opening bracket.
    """

    depth = 0
    for index in range(len(text) - 1, -1, -1):
        char = text[index]
        if char == ")":
            depth += 1
        elif char == "(":
            depth -= 1
            if depth == 0:
                return index
    return -1


def parse_target_string(text: str) -> ParsedTarget:
    """Parse ``"<name>(<condition>)"`` into its parts.

    Only the last top-level group counts as the condition and it must close
    the string: ``"A(B)(C)"`` yields ``("A(B)", "C")`` and ``"A(B(C))"``
    yields ``("A", "B(C)")``. Strings without a trailing balanced group, or
    with an empty one, carry no condition.
    """

    stripped = text.strip()
    if not stripped.endswith(")"):
        return ParsedTarget(stripped, None)

    start = _last_group_start(stripped)
    if start <= 0:
        return ParsedTarget(stripped, None)

    name = stripped[:start].strip()
    condition = stripped[start + 1 : -1].strip()
    if not name:
        return ParsedTarget(stripped, None)
    return ParsedTarget(name, condition or None)


__all__ = ["ParsedTarget", "parse_target_string"]

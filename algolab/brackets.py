"""Checking that round, square and curly brackets are properly nested."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def check_brackets(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed by its own kind, in order."""
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack
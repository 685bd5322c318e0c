"""Small text helpers used when reading XPM data."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _SEPARATORS.split(text) if word]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Return the index of the first occurrence of needle in text, or -1.

    A needle longer than limit is never found.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like find, but ignore occurrences that sit inside double quotes."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    quoted = False
    last_start = len(text) - len(needle)
    for pos, char in enumerate(text[: last_start + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1
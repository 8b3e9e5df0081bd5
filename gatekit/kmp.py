"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_table(pattern: Sequence) -> list[int]:
    """Return, for each position, the length of the longest proper prefix
    of ``pattern[:i + 1]`` that is also its suffix."""
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp(text: Sequence, pattern: Sequence) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1.

    An empty pattern matches at index 0.
    """
    if not pattern:
        return 0
    table = prefix_table(pattern)
    matched = 0
    for position, item in enumerate(text):
        while matched and item != pattern[matched]:
            matched = table[matched - 1]
        if item == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                return position - matched + 1
    return -1
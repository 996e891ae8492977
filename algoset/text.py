"""String algorithms: reductions, palindromes, frequencies and run-length compression."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import groupby

__all__ = [
    "remove_adjacent_duplicates",
    "is_palindrome",
    "remove_occurrences",
    "max_frequency_difference",
    "max_manhattan_distance",
    "compress",
]


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly drop pairs of equal adjacent characters until none remain."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_palindrome(s: str) -> bool:
    """Check whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch.lower() for ch in s if _is_ascii_alnum(ch)]
    return cleaned == cleaned[::-1]


def remove_occurrences(s: str, part: str) -> str:
    """Remove the leftmost occurrence of ``part`` from ``s`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def max_frequency_difference(s: str) -> int:
    """Return the largest odd letter frequency minus the smallest even one.

    ``s`` must consist of lowercase ASCII letters only.
    """
    if any(not ("a" <= ch <= "z") for ch in s):
        raise ValueError("s must contain only lowercase ASCII letters")
    frequencies = Counter(s).values()
    max_odd = max((f for f in frequencies if f % 2), default=0)
    min_even = min((f for f in frequencies if f % 2 == 0), default=len(s))
    return max_odd - min_even


def _best_along(s: str, k: int, direction: str) -> int:
    best = 0
    position = 0
    opposite = 0
    for ch in s:
        if ch in direction:
            position += 1
        else:
            position -= 1
            opposite += 1
        best = max(best, position + 2 * min(k, opposite))
    return best


def max_manhattan_distance(s: str, k: int) -> int:
    """Largest Manhattan distance from the origin reached along the moves in ``s``.

    ``s`` holds the moves ``N``, ``S``, ``E`` and ``W``; up to ``k`` of them may
    be changed to any other direction.
    """
    return max(_best_along(s, k, direction) for direction in ("NE", "NW", "SE", "SW"))


def compress(chars: Iterable[str]) -> str:
    """Run-length encode ``chars``: each run is its character followed by its length if above one."""
    pieces: list[str] = []
    for ch, run in groupby(chars):
        length = sum(1 for _ in run)
        pieces.append(ch if length == 1 else f"{ch}{length}")
    return "".join(pieces)
"""Enumeration and dynamic-programming problems over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product

__all__ = [
    "letter_combinations",
    "subsets",
    "largest_divisible_subset",
    "can_partition",
    "largest_rectangle_area",
]

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad can spell from ``digits``, in keypad order."""
    if not digits:
        return []
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError("digits must contain only the characters 0-9")
    letters = [_KEYPAD[int(ch)] for ch in digits]
    return ["".join(combo) for combo in product(*letters)]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, each keeping the input order.

    Subsets leaving out an element come before those that include it.
    """
    result: list[list[int]] = [[]]
    for value in reversed(nums):
        result = result + [[value, *rest] for rest in result]
    return result


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """Largest subset, sorted ascending, in which every pair divides one another."""
    if 0 in nums:
        raise ValueError("nums must not contain zero")
    ordered = sorted(nums)
    if not ordered:
        return []
    sizes = [1] * len(ordered)
    previous = [-1] * len(ordered)
    best_index, best_size = 0, 1
    for i, value in enumerate(ordered):
        for j in range(i):
            if value % ordered[j] == 0 and sizes[i] < sizes[j] + 1:
                sizes[i] = sizes[j] + 1
                previous[i] = j
        if sizes[i] > best_size:
            best_size = sizes[i]
            best_index = i
    chain: list[int] = []
    index = best_index
    while index != -1:
        chain.append(ordered[index])
        index = previous[index]
    chain.reverse()
    return chain


def can_partition(nums: Sequence[int]) -> bool:
    """Whether ``nums`` splits into two groups of equal sum."""
    if any(value < 0 for value in nums):
        raise ValueError("nums must not contain negative values")
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    limit = (1 << (target + 1)) - 1
    reachable = 1
    for value in nums:
        reachable |= (reachable << value) & limit
    return bool(reachable >> target & 1)


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under the histogram ``heights``."""
    best = 0
    stack: list[int] = []
    extended = [*heights, 0]
    for index, height in enumerate(extended):
        while stack and extended[stack[-1]] >= height:
            top = stack.pop()
            left = stack[-1] if stack else -1
            best = max(best, extended[top] * (index - left - 1))
        stack.append(index)
    return best
"""Scans, counts and binary searches over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence
from itertools import groupby, pairwise

__all__ = [
    "max_profit",
    "find_lucky",
    "is_sorted_and_rotated",
    "count_hills_and_valleys",
    "move_zeroes",
    "find_duplicate",
    "min_operations_to_k",
    "min_operations_to_distinct",
    "max_unique_sum",
    "max_consecutive_ones",
    "pivot_index",
    "peak_index",
]


def _require_non_empty(name: str, values: Sequence[int]) -> None:
    if not values:
        raise ValueError(f"{name} must not be empty")


def max_profit(prices: Sequence[int]) -> int:
    """Best total profit from any number of buy/sell transactions over ``prices``."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def find_lucky(arr: Sequence[int]) -> int:
    """Largest value whose frequency equals the value itself, or -1 if there is none."""
    counts = Counter(arr)
    return max((value for value, count in counts.items() if value >= 1 and value == count), default=-1)


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Check whether ``nums`` is a non-decreasing sequence rotated by some amount."""
    _require_non_empty("nums", nums)
    descents = sum(1 for earlier, later in pairwise(nums) if earlier > later)
    if nums[-1] > nums[0]:
        descents += 1
    return descents <= 1


def count_hills_and_valleys(nums: Sequence[int]) -> int:
    """Count hills and valleys, treating runs of equal neighbours as one point."""
    if len(nums) < 3:
        return 0
    count = 0
    previous = nums[0]
    for current, following in zip(nums[1:], nums[2:]):
        if current == following:
            continue
        if previous < current > following or previous > current < following:
            count += 1
        previous = current
    return count


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end of ``nums`` in place, keeping the order of the rest."""
    non_zero = [value for value in nums if value != 0]
    zeros = [value for value in nums if value == 0]
    nums[:] = non_zero + zeros


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value among ``nums``, whose values lie in 1..len(nums)-1.

    Returns -1 when no value is over-represented.
    """
    low, high = 1, len(nums) - 1
    duplicate = -1
    while low <= high:
        mid = (low + high) // 2
        at_most_mid = sum(1 for value in nums if value <= mid)
        if at_most_mid > mid:
            duplicate = mid
            high = mid - 1
        else:
            low = mid + 1
    return duplicate


def min_operations_to_k(nums: Sequence[int], k: int) -> int:
    """Operations needed to bring every value down to ``k``, one distinct level at a time.

    Returns -1 when some value is already below ``k``.
    """
    _require_non_empty("nums", nums)
    if k > min(nums):
        return -1
    return len({value for value in nums if value > k})


def min_operations_to_distinct(nums: Sequence[int]) -> int:
    """Number of removals of the first three elements needed to leave only distinct values."""
    seen: set[int] = set()
    for index in range(len(nums) - 1, -1, -1):
        value = nums[index]
        if value in seen:
            return (index + 3) // 3
        seen.add(value)
    return 0


def max_unique_sum(nums: Sequence[int]) -> int:
    """Largest sum of a subarray of distinct values after deleting any elements."""
    _require_non_empty("nums", nums)
    largest = max(nums)
    if largest <= 0:
        return largest
    return sum({value for value in nums if value >= 0})


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones in ``nums``."""
    return max((sum(1 for _ in run) for value, run in groupby(nums) if value == 1), default=0)


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1 if there is none."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def peak_index(arr: Sequence[int]) -> int:
    """Index of the peak of a mountain-shaped sequence, found by binary search."""
    _require_non_empty("arr", arr)
    low, high = 0, len(arr) - 1
    while low < high:
        mid = (low + high) // 2
        if arr[mid] < arr[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low
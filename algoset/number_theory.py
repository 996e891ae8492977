"""Integer sequences, bit tricks, prime counting and integer square roots."""

from __future__ import annotations

import math

__all__ = [
    "fib",
    "bitwise_complement",
    "count_primes",
    "is_power_of_four",
    "integer_sqrt",
]


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    _require_non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def bitwise_complement(n: int) -> int:
    """Flip every bit of ``n`` up to its highest set bit.

    Zero is treated as the single bit ``0``, so its complement is ``1``.
    """
    _require_non_negative("n", n)
    if n == 0:
        return 1
    mask = (1 << n.bit_length()) - 1
    return ~n & mask


def count_primes(n: int) -> int:
    """Count the primes strictly less than ``n``."""
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def is_power_of_four(n: int) -> bool:
    """Return True if ``n`` is 4 raised to some non-negative integer power."""
    return n > 0 and n & (n - 1) == 0 and (n - 1) % 3 == 0


def integer_sqrt(x: int) -> int:
    """Return the floor of the square root of ``x``."""
    _require_non_negative("x", x)
    low, high = 0, x
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer
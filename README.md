# algoset

Small, dependency-free implementations of well-known algorithm exercises,
grouped by theme. Every function takes plain Python values (ints, strings,
lists) and returns plain Python values.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `algoset.number_theory`

- `fib(n)` – the n-th Fibonacci number (`fib(0) == 0`, `fib(1) == 1`).
- `bitwise_complement(n)` – flip every bit of `n` up to its highest set bit (`0` gives `1`).
- `count_primes(n)` – how many primes are strictly less than `n`.
- `is_power_of_four(n)` – whether `n` is a power of four.
- `integer_sqrt(x)` – the floor of the square root of `x`.

`fib`, `bitwise_complement` and `integer_sqrt` raise `ValueError` for negative input.

### `algoset.text`

- `remove_adjacent_duplicates(s)` – repeatedly drop pairs of equal neighbouring characters.
- `is_palindrome(s)` – palindrome check ignoring case and any character that is not an ASCII letter or digit.
- `remove_occurrences(s, part)` – remove the leftmost `part` until none remains; an empty `part` raises `ValueError`.
- `max_frequency_difference(s)` – largest odd letter frequency minus smallest even one; `s` must be lowercase ASCII letters, otherwise `ValueError`.
- `max_manhattan_distance(s, k)` – furthest Manhattan distance from the origin reached on an `N`/`S`/`E`/`W` walk when up to `k` moves may be changed.
- `compress(chars)` – run-length encode an iterable of characters and return the result as a string; runs of length one keep just their character.

### `algoset.matrix`

- `search_matrix(matrix, target)` – search a matrix whose rows and columns are sorted ascending; an empty matrix gives `False`.
- `spiral_order(matrix)` – the elements of a matrix in clockwise spiral order from the top-left.

### `algoset.arrays`

- `max_profit(prices)` – best total profit from any number of buy/sell transactions.
- `find_lucky(arr)` – largest value whose frequency equals the value, or `-1`.
- `is_sorted_and_rotated(nums)` – whether `nums` is a rotated non-decreasing sequence.
- `count_hills_and_valleys(nums)` – number of hills and valleys, runs of equal values counting once.
- `move_zeroes(nums)` – move zeros to the end of a list in place, keeping the order of the rest; returns `None`.
- `find_duplicate(nums)` – the repeated value among values in `1..len(nums)-1`, or `-1`.
- `min_operations_to_k(nums, k)` – number of distinct values above `k`, or `-1` if any value is below `k`.
- `min_operations_to_distinct(nums)` – how many removals of the first three elements leave only distinct values.
- `max_unique_sum(nums)` – largest sum of distinct values left after deleting elements.
- `max_consecutive_ones(nums)` – length of the longest run of ones.
- `pivot_index(nums)` – leftmost index with equal sums on both sides, or `-1`.
- `peak_index(arr)` – index of the peak of a mountain-shaped sequence.

`is_sorted_and_rotated`, `min_operations_to_k`, `max_unique_sum` and
`peak_index` raise `ValueError` for an empty sequence.

### `algoset.combinatorics`

- `letter_combinations(digits)` – every string a phone keypad can spell from `digits`, in keypad order; non-digits raise `ValueError`.
- `subsets(nums)` – every subset of a list, each in input order.
- `largest_divisible_subset(nums)` – the largest subset, sorted ascending, in which every pair divides one another; zero raises `ValueError`.
- `can_partition(nums)` – whether non-negative integers split into two equal-sum groups; negative values raise `ValueError`.
- `largest_rectangle_area(heights)` – the largest rectangle under a histogram.

## Example

```python
from algoset.arrays import move_zeroes
from algoset.matrix import spiral_order
from algoset.text import compress

print(compress("aabccc"))      # a2bc3

nums = [0, 1, 0, 3, 12]
move_zeroes(nums)
print(nums)                    # [1, 3, 12, 0, 0]

print(spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))
# [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

## What it does not do

`algoset` is a library only: it has no command-line interface and reads or
writes no files.
"""Search and traversal over two-dimensional matrices."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

__all__ = ["search_matrix", "spiral_order"]

T = TypeVar("T")


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Find ``target`` in a matrix whose rows and columns are sorted ascending."""
    if not matrix or not matrix[0]:
        return False
    rows = len(matrix)
    row, col = 0, len(matrix[0]) - 1
    while row < rows and col >= 0:
        element = matrix[row][col]
        if element == target:
            return True
        if element < target:
            row += 1
        else:
            col -= 1
    return False


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Return the elements of ``matrix`` in clockwise spiral order from the top-left."""
    remaining = [list(row) for row in matrix]
    result: list[T] = []
    while remaining and remaining[0]:
        result.extend(remaining[0])
        remaining = [list(column) for column in zip(*remaining[1:])][::-1]
    return result
import pytest

from algoset.matrix import search_matrix, spiral_order

SORTED = [
    [1, 4, 7, 11, 15],
    [2, 5, 8, 12, 19],
    [3, 6, 9, 16, 22],
    [10, 13, 14, 17, 24],
    [18, 21, 23, 26, 30],
]


@pytest.mark.parametrize("target", sorted({v for row in SORTED for v in row}))
def test_search_matrix_finds_every_element(target):
    assert search_matrix(SORTED, target)


@pytest.mark.parametrize("target", [0, 20, 25, 31, -7])
def test_search_matrix_missing(target):
    assert not search_matrix(SORTED, target)


def test_search_matrix_empty():
    assert not search_matrix([], 1)
    assert not search_matrix([[]], 1)


def test_spiral_order_square():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_order_single_column():
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


def test_spiral_order_single_row():
    assert spiral_order([[4, 5, 6]]) == [4, 5, 6]


@pytest.mark.parametrize("rows, cols", [(1, 1), (2, 3), (3, 4), (4, 2), (5, 5), (6, 1)])
def test_spiral_order_visits_each_cell_once(rows, cols):
    matrix = [[r * cols + c for c in range(cols)] for r in range(rows)]
    result = spiral_order(matrix)
    assert sorted(result) == list(range(rows * cols))
    assert result[:cols] == matrix[0]


def test_spiral_order_does_not_mutate_input():
    matrix = [[1, 2], [3, 4]]
    spiral_order(matrix)
    assert matrix == [[1, 2], [3, 4]]


def test_spiral_order_empty():
    assert spiral_order([]) == []
import pytest

from algokit.matrix import min_path_cost, multiply, strassen_2x2

MAT1 = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
MAT2 = [[9, 8, 7], [6, 5, 4], [3, 2, 1]]
IDENTITY3 = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_multiply_source_example():
    assert multiply(MAT1, MAT2) == [[30, 24, 18], [84, 69, 54], [138, 114, 90]]


def test_multiply_by_identity():
    assert multiply(MAT1, IDENTITY3) == MAT1
    assert multiply(IDENTITY3, MAT2) == MAT2


def test_multiply_is_associative():
    assert multiply(multiply(MAT1, MAT2), MAT1) == multiply(MAT1, multiply(MAT2, MAT1))


def test_multiply_rectangular_shape():
    result = multiply([[1, 2, 3], [4, 5, 6]], [[1], [2], [3]])
    assert len(result) == 2
    assert all(len(row) == 1 for row in result)


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_multiply_ragged_rows():
    with pytest.raises(ValueError):
        multiply([[1, 2], [3]], [[1], [2]])


def test_strassen_source_example():
    assert strassen_2x2([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


@pytest.mark.parametrize(
    "a,b",
    [
        ([[1, 2], [3, 4]], [[5, 6], [7, 8]]),
        ([[0, 0], [0, 0]], [[9, -3], [2, 7]]),
        ([[-1, 4], [6, -2]], [[3, 3], [-5, 1]]),
        ([[1, 0], [0, 1]], [[8, 6], [4, 2]]),
    ],
)
def test_strassen_agrees_with_plain_product(a, b):
    assert strassen_2x2(a, b) == multiply(a, b)


def test_strassen_rejects_other_shapes():
    with pytest.raises(ValueError):
        strassen_2x2(MAT1, MAT2)


def test_min_path_cost_source_example():
    assert min_path_cost([[1, 2, 3], [4, 8, 2], [1, 5, 3]]) == 8


def test_min_path_cost_single_cell():
    assert min_path_cost([[7]]) == 7


def test_min_path_cost_not_above_border_paths():
    grid = [[1, 2, 3], [4, 8, 2], [1, 5, 3]]
    along_top = sum(grid[0]) + sum(row[-1] for row in grid[1:])
    along_left = sum(row[0] for row in grid) + sum(grid[-1][1:])
    assert min_path_cost(grid) <= min(along_top, along_left)


def test_min_path_cost_single_row_is_sum():
    assert min_path_cost([[3, 1, 4, 1, 5]]) == sum([3, 1, 4, 1, 5])


def test_min_path_cost_empty_raises():
    with pytest.raises(ValueError):
        min_path_cost([])
"""Matrix products and a grid path-cost solver."""

from __future__ import annotations

from typing import Sequence

__all__ = ["multiply", "strassen_2x2", "min_path_cost"]

Matrix = Sequence[Sequence[int]]


def _check_rectangular(matrix: Matrix, name: str) -> int:
    if not matrix or not matrix[0]:
        raise ValueError(f"{name} must be a non-empty matrix")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError(f"{name} rows must all have the same length")
    return width


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product ``a @ b``."""
    inner = _check_rectangular(a, "a")
    _check_rectangular(b, "b")
    if inner != len(b):
        raise ValueError("columns of a must match rows of b")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def strassen_2x2(a: Matrix, b: Matrix) -> list[list[int]]:
    """Multiply two 2x2 matrices with Strassen's seven products."""
    for matrix, name in ((a, "a"), (b, "b")):
        if len(matrix) != 2 or any(len(row) != 2 for row in matrix):
            raise ValueError(f"{name} must be a 2x2 matrix")
    (a11, a12), (a21, a22) = a
    (b11, b12), (b21, b22) = b
    m1 = (a11 + a22) * (b11 + b22)
    m2 = (a21 + a22) * b11
    m3 = a11 * (b12 - b22)
    m4 = a22 * (b21 - b11)
    m5 = (a11 + a12) * b22
    m6 = (a21 - a11) * (b11 + b12)
    m7 = (a12 - a22) * (b21 + b22)
    return [
        [m1 + m4 - m5 + m7, m3 + m5],
        [m2 + m4, m1 - m2 + m3 + m6],
    ]


def min_path_cost(cost: Matrix) -> int:
    """Cheapest path from the top-left to the bottom-right cell.

    Each step moves right, down or diagonally down-right; every visited
    cell's cost is added.
    """
    _check_rectangular(cost, "cost")
    previous: list[int] = []
    for row in cost:
        current: list[int] = []
        for j, cell in enumerate(row):
            options = []
            if previous:
                options.append(previous[j])
                if j:
                    options.append(previous[j - 1])
            if j:
                options.append(current[j - 1])
            current.append(cell + (min(options) if options else 0))
        previous = current
    return previous[-1]
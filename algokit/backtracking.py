"""Backtracking searches: queens, subset sums and bin loading."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

__all__ = ["solve_n_queens", "subset_sums", "can_load"]


def solve_n_queens(n: int) -> Optional[list[list[int]]]:
    """Place n non-attacking queens column by column; return the 0/1 board or None."""
    if n < 0:
        raise ValueError("board size must not be negative")
    rows: list[int] = []

    def safe(row: int) -> bool:
        col = len(rows)
        return all(
            other != row and abs(other - row) != col - other_col
            for other_col, other in enumerate(rows)
        )

    def place() -> bool:
        if len(rows) == n:
            return True
        for row in range(n):
            if safe(row):
                rows.append(row)
                if place():
                    return True
                rows.pop()
        return False

    if not place():
        return None
    board = [[0] * n for _ in range(n)]
    for col, row in enumerate(rows):
        board[row][col] = 1
    return board


def subset_sums(values: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield every subset of non-negative ``values`` summing to ``target``.

    Subsets keep the input order; items are tried included before excluded.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    return _subsets(items, target)


def _subsets(items: Sequence[int], target: int) -> Iterator[list[int]]:
    chosen: list[int] = []

    def visit(index: int, total: int) -> Iterator[list[int]]:
        if total > target:
            return
        if index == len(items):
            if total == target:
                yield list(chosen)
            return
        chosen.append(items[index])
        yield from visit(index + 1, total + items[index])
        chosen.pop()
        yield from visit(index + 1, total)

    yield from visit(0, 0)


def can_load(items: Sequence[int], containers: Sequence[int]) -> bool:
    """Tell whether every item fits into the containers without exceeding capacity."""
    items = list(items)
    remaining = list(containers)

    def place(index: int) -> bool:
        if index == len(items):
            return True
        size = items[index]
        for slot, capacity in enumerate(remaining):
            if capacity >= size:
                remaining[slot] -= size
                if place(index + 1):
                    return True
                remaining[slot] += size
        return False

    return place(0)
"""Greedy, dynamic-programming and branch-and-bound optimisers."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from math import inf
from typing import Sequence

__all__ = [
    "KnapsackResult",
    "Assignment",
    "fractional_knapsack",
    "optimal_bst_cost",
    "tsp_cost",
    "assign_jobs",
]


@dataclass(frozen=True)
class KnapsackResult:
    """Share of each item taken (in input order) and the profit gained."""

    fractions: tuple[float, ...]
    profit: float


@dataclass(frozen=True)
class Assignment:
    """``jobs[worker]`` is the job given to each worker; ``cost`` is the total."""

    jobs: tuple[int, ...]
    cost: float


def _check_square(matrix: Sequence[Sequence[float]], name: str) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError(f"{name} must be a square matrix")
    return size


def fractional_knapsack(
    weights: Sequence[float], profits: Sequence[float], capacity: float
) -> KnapsackResult:
    """Fill a knapsack greedily by profit per unit weight, splitting the last item."""
    weights = list(weights)
    profits = list(profits)
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("every weight must be positive")

    order = sorted(
        range(len(weights)), key=lambda i: profits[i] / weights[i], reverse=True
    )
    fractions = [0.0] * len(weights)
    remaining = float(capacity)
    total = 0.0
    for item in order:
        if weights[item] > remaining:
            fractions[item] = remaining / weights[item]
            total += fractions[item] * profits[item]
            break
        fractions[item] = 1.0
        total += profits[item]
        remaining -= weights[item]
    return KnapsackResult(tuple(fractions), total)


def optimal_bst_cost(freq: Sequence[int]) -> int:
    """Least total search cost of a binary search tree over keys with these frequencies."""
    freq = list(freq)
    n = len(freq)
    if n == 0:
        return 0
    prefix = list(accumulate(freq, initial=0))
    # cost[i][j] covers the keys i .. j-1
    cost = [[0] * (n + 1) for _ in range(n + 1)]
    for length in range(1, n + 1):
        for i in range(n - length + 1):
            j = i + length
            weight = prefix[j] - prefix[i]
            cost[i][j] = weight + min(cost[i][r] + cost[r + 1][j] for r in range(i, j))
    return cost[0][n]


def tsp_cost(graph: Sequence[Sequence[float]]) -> float:
    """Cost of the cheapest tour that starts and ends at city 0 and visits every city."""
    n = _check_square(graph, "graph")
    if n == 0:
        raise ValueError("graph must have at least one city")
    if n == 1:
        return 0
    states = 1 << n
    dp = [[inf] * n for _ in range(states)]
    dp[1][0] = 0
    for mask in range(1, states):
        for u, reached in enumerate(dp[mask]):
            if not mask >> u & 1 or reached == inf:
                continue
            for v, step in enumerate(graph[u]):
                if mask >> v & 1:
                    continue
                target = dp[mask | 1 << v]
                candidate = reached + step
                if candidate < target[v]:
                    target[v] = candidate
    full = dp[states - 1]
    return min(full[i] + graph[i][0] for i in range(1, n))


def assign_jobs(cost_matrix: Sequence[Sequence[float]]) -> Assignment:
    """Give each worker (row) a distinct job (column) at least total cost."""
    n = _check_square(cost_matrix, "cost_matrix")
    best_cost = inf
    best_jobs: tuple[int, ...] = ()
    chosen: list[int] = []
    used = [False] * n

    def branch(worker: int, current: float) -> None:
        nonlocal best_cost, best_jobs
        if worker == n:
            if current < best_cost:
                best_cost = current
                best_jobs = tuple(chosen)
            return
        for job, taken in enumerate(used):
            if taken:
                continue
            chosen.append(job)
            used[job] = True
            new_cost = current + cost_matrix[worker][job]
            if new_cost < best_cost:
                branch(worker + 1, new_cost)
            used[job] = False
            chosen.pop()

    branch(0, 0)
    return Assignment(best_jobs, best_cost)
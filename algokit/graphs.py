"""Graph algorithms: spanning trees, shortest paths, colouring and tours."""

from __future__ import annotations

from dataclasses import dataclass
from math import inf
from operator import attrgetter
from typing import Iterable, Optional, Sequence

__all__ = [
    "Edge",
    "TimedEdge",
    "kruskal_mst",
    "floyd_warshall",
    "graph_coloring",
    "hamiltonian_cycle",
    "min_cost_within_time",
]


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    src: int
    dest: int
    weight: float


@dataclass(frozen=True)
class TimedEdge:
    """A directed edge that has both a cost and a travel time."""

    src: int
    dest: int
    cost: int
    time: int


def _check_square(matrix: Sequence[Sequence[object]], name: str) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError(f"{name} must be a square matrix")
    return size


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is outside 0..{count - 1}")


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning tree (or forest), lightest first."""
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    edges = list(edges)
    for edge in edges:
        _check_vertex(edge.src, vertex_count)
        _check_vertex(edge.dest, vertex_count)

    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    tree: list[Edge] = []
    for edge in sorted(edges, key=attrgetter("weight")):
        if len(tree) >= vertex_count - 1:
            break
        root_a, root_b = find(edge.src), find(edge.dest)
        if root_a != root_b:
            tree.append(edge)
            parent[root_a] = root_b
    return tree


def floyd_warshall(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances; use ``math.inf`` where there is no edge."""
    n = _check_square(graph, "graph")
    dist = [list(row) for row in graph]
    for k in range(n):
        via = dist[k]
        for row in dist:
            through = row[k]
            for j, direct in enumerate(row):
                candidate = through + via[j]
                if candidate < direct:
                    row[j] = candidate
    return dist


def graph_coloring(graph: Sequence[Sequence[object]], colors: int) -> Optional[list[int]]:
    """Colour vertices 1..colors so no adjacent pair shares one; None if impossible."""
    n = _check_square(graph, "graph")
    assigned = [0] * n

    def safe(vertex: int, color: int) -> bool:
        return not any(
            adjacent and other == color
            for adjacent, other in zip(graph[vertex], assigned)
        )

    def place(vertex: int) -> bool:
        if vertex == n:
            return True
        for color in range(1, colors + 1):
            if safe(vertex, color):
                assigned[vertex] = color
                if place(vertex + 1):
                    return True
                assigned[vertex] = 0
        return False

    return assigned if place(0) else None


def hamiltonian_cycle(graph: Sequence[Sequence[object]]) -> Optional[list[int]]:
    """Return a cycle through every vertex, from 0 back to 0, or None."""
    n = _check_square(graph, "graph")
    if n == 0:
        raise ValueError("graph must have at least one vertex")
    path = [0]
    on_path = {0}

    def extend() -> bool:
        if len(path) == n:
            return bool(graph[path[-1]][path[0]])
        for vertex in range(1, n):
            if graph[path[-1]][vertex] and vertex not in on_path:
                path.append(vertex)
                on_path.add(vertex)
                if extend():
                    return True
                on_path.discard(path.pop())
        return False

    return [*path, 0] if extend() else None


def min_cost_within_time(
    node_count: int,
    edges: Iterable[TimedEdge],
    source: int,
    destination: int,
    max_time: int,
) -> Optional[int]:
    """Cheapest cost from ``source`` to ``destination`` taking at most ``max_time``.

    Returns None when the destination cannot be reached in time.
    """
    if node_count <= 0:
        raise ValueError("node_count must be positive")
    if max_time < 0:
        raise ValueError("max_time must not be negative")
    _check_vertex(source, node_count)
    _check_vertex(destination, node_count)

    adjacency: list[list[TimedEdge]] = [[] for _ in range(node_count)]
    for edge in edges:
        _check_vertex(edge.src, node_count)
        _check_vertex(edge.dest, node_count)
        if edge.time < 0:
            raise ValueError("edge times must not be negative")
        adjacency[edge.src].append(edge)

    best = [[inf] * (max_time + 1) for _ in range(node_count)]
    best[source][0] = 0
    for time in range(max_time + 1):
        for node, outgoing in enumerate(adjacency):
            here = best[node][time]
            if here == inf:
                continue
            for edge in outgoing:
                arrival = time + edge.time
                if arrival <= max_time and here + edge.cost < best[edge.dest][arrival]:
                    best[edge.dest][arrival] = here + edge.cost
    result = min(best[destination])
    return None if result == inf else result
"""Shortest paths and path matrices for graphs held as adjacency matrices."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INFINITY = 9999
"""Distance treated as unreachable; nodes this far away are never settled."""

Matrix = list[list[int]]


@dataclass(frozen=True)
class ShortestPath:
    """Result of a shortest-path search: total distance and the visited nodes."""

    distance: int
    path: tuple[int, ...]


def _size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def shortest_path(adj: Sequence[Sequence[int]], source: int, dest: int) -> ShortestPath | None:
    """Find the cheapest path from ``source`` to ``dest`` with Dijkstra's algorithm.

    Nodes are 0-based indices into the square matrix ``adj``; an entry greater
    than zero is the weight of the edge between its row and column.  Returns
    ``None`` when ``dest`` cannot be reached.
    """
    n = _size(adj)
    for node in (source, dest):
        if not 0 <= node < n:
            raise ValueError(f"node {node} is outside the graph of {n} vertices")

    dist = [INFINITY] * n
    predecessor: list[int | None] = [None] * n
    permanent = [False] * n
    dist[source] = 0
    permanent[source] = True

    current = source
    while current != dest:
        for node, weight in enumerate(adj[current]):
            if weight > 0 and not permanent[node]:
                candidate = dist[current] + weight
                if candidate < dist[node]:
                    dist[node] = candidate
                    predecessor[node] = current

        tentative = [
            node
            for node, (d, done) in enumerate(zip(dist, permanent))
            if not done and d < INFINITY
        ]
        if not tentative:
            return None
        current = min(tentative, key=dist.__getitem__)
        permanent[current] = True

    path: list[int] = []
    node: int | None = dest
    while node is not None:
        path.append(node)
        node = predecessor[node]
    path.reverse()
    return ShortestPath(dist[dest], tuple(path))


def multiply(mat1: Sequence[Sequence[int]], mat2: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product of ``mat1`` and ``mat2``."""
    if any(len(row) != len(mat2) for row in mat1):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*mat2))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in mat1]


def power_matrix(adj: Sequence[Sequence[int]], p: int) -> Matrix:
    """Return ``adj`` raised to the power ``p``; a ``p`` of 1 or less gives a copy of ``adj``."""
    _size(adj)
    result = [list(row) for row in adj]
    for _ in range(p - 1):
        result = multiply(result, adj)
    return result


def to_boolean(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Replace every non-zero entry with 1 and every zero with 0."""
    return [[0 if value == 0 else 1 for value in row] for row in matrix]


def path_matrix(adj: Sequence[Sequence[int]]) -> Matrix:
    """Return the reachability matrix: 1 where a path of length 1..n exists."""
    n = _size(adj)
    boolean = to_boolean(adj)
    total = [[0] * n for _ in range(n)]
    power = boolean
    for _ in range(n):
        total = [[a + b for a, b in zip(t_row, p_row)] for t_row, p_row in zip(total, power)]
        power = multiply(power, boolean)
    return to_boolean(total)


def format_matrix(matrix: Sequence[Sequence[int]], width: int = 4) -> str:
    """Render a matrix as right-aligned columns of the given width, one row per line."""
    return "\n".join("".join(f"{value:{width}d}" for value in row) for row in matrix)
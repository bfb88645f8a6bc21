"""Adjacency matrices, breadth- and depth-first search, multistage shortest path."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any


class Graph:
    """Undirected graph of labelled vertices, searched from vertex 0."""

    def __init__(self) -> None:
        self._labels: list[Any] = []
        self._adjacent: list[set[int]] = []

    def add_vertex(self, value: Any) -> int:
        """Add a vertex labelled ``value`` and return its index."""
        self._labels.append(value)
        self._adjacent.append(set())
        return len(self._labels) - 1

    def add_edge(self, start: int, end: int) -> None:
        """Connect the vertices at indices ``start`` and ``end``."""
        for index in (start, end):
            if not 0 <= index < len(self._labels):
                raise IndexError(f"no vertex at index {index}")
        self._adjacent[start].add(end)
        self._adjacent[end].add(start)

    def _first_unvisited(self, index: int, visited: list[bool]) -> int | None:
        return next((n for n in sorted(self._adjacent[index]) if not visited[n]), None)

    def bfs(self) -> list[Any]:
        """Labels in breadth-first order from vertex 0, lower indices first."""
        if not self._labels:
            return []
        visited = [False] * len(self._labels)
        visited[0] = True
        order = [self._labels[0]]
        queue = deque([0])
        while queue:
            current = queue.popleft()
            for neighbour in sorted(self._adjacent[current]):
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(self._labels[neighbour])
                    queue.append(neighbour)
        return order

    def dfs(self) -> list[Any]:
        """Labels in depth-first order from vertex 0, lower indices first."""
        if not self._labels:
            return []
        visited = [False] * len(self._labels)
        visited[0] = True
        order = [self._labels[0]]
        stack = [0]
        while stack:
            following = self._first_unvisited(stack[-1], visited)
            if following is None:
                stack.pop()
            else:
                visited[following] = True
                order.append(self._labels[following])
                stack.append(following)
        return order

    def __len__(self) -> int:
        return len(self._labels)


def adjacency_matrix(vertices: int, edges: Iterable[tuple[int, int, int]]) -> list[list[int]]:
    """Weighted adjacency matrix of an undirected graph; 0 means no edge."""
    if vertices < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * vertices for _ in range(vertices)]
    for u, v, weight in edges:
        for index in (u, v):
            if not 0 <= index < vertices:
                raise IndexError(f"no vertex at index {index}")
        matrix[u][v] = weight
        matrix[v][u] = weight
    return matrix


def remove_edge(matrix: list[list[int]], u: int, v: int) -> None:
    """Remove the undirected edge between ``u`` and ``v`` in place."""
    for index in (u, v):
        if not 0 <= index < len(matrix):
            raise IndexError(f"no vertex at index {index}")
    matrix[u][v] = 0
    matrix[v][u] = 0


def format_matrix(matrix: Iterable[Iterable[Any]]) -> str:
    """Render each entry right-aligned in three columns followed by a space."""
    return "".join("".join(f"{entry:>3} " for entry in row) + "\n" for row in matrix)


def _no_edge(weight: float | None) -> bool:
    return weight is None or weight == math.inf


def multistage_shortest_path(graph: Sequence[Sequence[float | None]]) -> float:
    """Cost of the cheapest path from the first to the last vertex.

    ``graph`` is a square matrix in which a missing edge is ``None`` or
    ``math.inf``; every edge must lead to a vertex with a higher index.
    Returns ``math.inf`` when the last vertex cannot be reached.
    """
    size = len(graph)
    if size == 0:
        raise ValueError("graph has no vertices")
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    dist = [math.inf] * size
    dist[-1] = 0
    for i in range(size - 2, -1, -1):
        for j, weight in enumerate(graph[i]):
            if _no_edge(weight):
                continue
            if j <= i:
                raise ValueError("edges must lead to a later vertex")
            dist[i] = min(dist[i], weight + dist[j])  # type: ignore[operator]
    return dist[0]
"""Depth-first traversal, cycle detection and connected components on small graphs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def undirected_adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Adjacency lists for vertices ``0..vertex_count`` with every edge added both ways.

    Neighbours keep the order in which the edges were given.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count cannot be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for a, b in edges:
        for vertex in (a, b):
            if not 0 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is outside 0..{vertex_count}")
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _preorder(adjacency: Sequence[Sequence[int]], start: int, seen: set[int]) -> Iterator[int]:
    seen.add(start)
    yield start
    pending: list[Iterator[int]] = [iter(adjacency[start])]
    while pending:
        for neighbour in pending[-1]:
            if neighbour not in seen:
                seen.add(neighbour)
                yield neighbour
                pending.append(iter(adjacency[neighbour]))
                break
        else:
            pending.pop()


def dfs_traversal(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Depth-first order of an undirected graph on vertices ``1..vertex_count``.

    Every component is visited, starting each time from the lowest unvisited vertex.
    """
    adjacency = undirected_adjacency(vertex_count, edges)
    seen: set[int] = set()
    order: list[int] = []
    for vertex in range(1, vertex_count + 1):
        if vertex not in seen:
            order.extend(_preorder(adjacency, vertex, seen))
    return order


def has_cycle(adjacency: Sequence[Sequence[int]]) -> bool:
    """Whether the directed graph given by ``adjacency`` (vertices ``0..len-1``) has a cycle."""
    visited: set[int] = set()
    on_path: set[int] = set()
    for root in range(len(adjacency)):
        if root in visited:
            continue
        visited.add(root)
        on_path.add(root)
        pending: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while pending:
            node, neighbours = pending[-1]
            for neighbour in neighbours:
                if neighbour in on_path:
                    return True
                if neighbour not in visited:
                    visited.add(neighbour)
                    on_path.add(neighbour)
                    pending.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                on_path.discard(node)
                pending.pop()
    return False


def count_provinces(matrix: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in a square adjacency matrix (1 marks a link)."""
    size = len(matrix)
    if any(len(row) < size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    seen: set[int] = set()
    count = 0
    for start in range(size):
        if start in seen:
            continue
        count += 1
        seen.add(start)
        stack = [start]
        while stack:
            city = stack.pop()
            for other in range(size):
                if matrix[city][other] == 1 and other not in seen:
                    seen.add(other)
                    stack.append(other)
    return count
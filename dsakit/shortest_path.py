"""Single-source and all-pairs distances over an adjacency-matrix graph."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dsakit.graph import INFINITY, ArrayGraph, GraphError


def dijkstra(graph: ArrayGraph, source: int) -> list[int]:
    """Return distances from source, found by depth-first relaxation.

    Each vertex is visited once: its edges are relaxed, then its unvisited
    neighbours are visited in ascending order. Unreachable vertices keep
    ``INFINITY``.
    """
    size = graph.max_vertex_count
    if not 0 <= source < size:
        raise GraphError(f"vertex {source} is out of range")
    distance = [INFINITY] * size
    distance[source] = 0
    visited: set[int] = set()

    def visit(vertex: int) -> Iterator[int]:
        visited.add(vertex)
        neighbours = graph.neighbours(vertex)
        for other in neighbours:
            candidate = distance[vertex] + graph.weight(vertex, other)
            if distance[other] > candidate:
                distance[other] = candidate
        return iter(neighbours)

    stack = [visit(source)]
    while stack:
        for other in stack[-1]:
            if other not in visited:
                stack.append(visit(other))
                break
        else:
            stack.pop()
    return distance


def all_pairs(graph: ArrayGraph) -> list[list[int]]:
    """Return one distance row per vertex id."""
    return [dijkstra(graph, vertex) for vertex in range(graph.max_vertex_count)]


def format_distances(distances: Iterable[int], vertex_id: int) -> str:
    """Render a distance row, tab-separated, with ∞ for unreachable vertices."""
    cells = "".join("∞\t" if value == INFINITY else f"{value}\t" for value in distances)
    return f"{vertex_id} : {cells}"
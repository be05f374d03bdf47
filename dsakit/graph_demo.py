"""Command that builds sample graphs and prints spanning trees and distances."""

from __future__ import annotations

from collections.abc import Iterable

from dsakit.edge_heap import kruskal_heap
from dsakit.graph import ArrayGraph
from dsakit.shortest_path import all_pairs, dijkstra, format_distances
from dsakit.spanning import kruskal_step, prim

VERTEX_COUNT = 6

SPANNING_EDGES = ((0, 1, 4), (1, 2, 2), (2, 0, 3), (2, 3, 1), (3, 4, 1), (3, 5, 5), (4, 5, 6))
DISTANCE_EDGES = ((0, 1, 1), (1, 2, 2), (2, 0, 4), (2, 3, 1), (3, 4, 8), (3, 5, 3), (4, 5, 4))


def sample_graph(edges: Iterable[tuple[int, int, int]]) -> ArrayGraph:
    """Return an undirected graph on six vertices holding the given edges."""
    graph = ArrayGraph(VERTEX_COUNT)
    for vertex in range(VERTEX_COUNT):
        graph.add_vertex(vertex)
    for start, end, weight in edges:
        graph.add_edge(start, end, weight)
    return graph


def _distance_header() -> str:
    header = "    " + "\t".join(str(vertex) for vertex in range(VERTEX_COUNT))
    return header + "\n" + "-" * 29


def main(argv: list[str] | None = None) -> int:
    """Print Kruskal, Prim, single-source and all-pairs results for sample graphs."""
    original = sample_graph(SPANNING_EDGES)
    print("this graph is original")
    print(original.render())

    tree = sample_graph(())
    heap = kruskal_heap(original)
    accepted = 0
    while heap and accepted < original.vertex_count - 1:
        print("".join(f"{weight} " for weight in heap.weights()))
        if kruskal_step(heap, tree):
            accepted += 1
    print("\nthis graph is kruskal")
    print(tree.render())

    print("\nthis graph is prim")
    print(prim(original, 0).render())

    single = sample_graph(DISTANCE_EDGES)
    print("\nthis graph is dijkstra")
    print(single.render())
    print(_distance_header())
    print(format_distances(dijkstra(single, 0), 0))

    every = sample_graph(DISTANCE_EDGES)
    print("\nthis graph is floyd")
    print(every.render())
    print(_distance_header())
    for vertex, row in enumerate(all_pairs(every)):
        print(format_distances(row, vertex))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
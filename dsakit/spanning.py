"""Minimum spanning trees by Kruskal's and Prim's methods."""

from __future__ import annotations

from dsakit.edge_heap import EdgeHeap, kruskal_heap, prim_heap
from dsakit.graph import ArrayGraph


def kruskal_step(heap: EdgeHeap, tree: ArrayGraph) -> bool:
    """Take the lightest edge from heap into tree unless it closes a cycle.

    Returns True when the edge was kept.
    """
    edge = heap.pop()
    tree.add_edge(edge.from_vertex, edge.to_vertex, edge.weight)
    if tree.has_cycle_through(edge.from_vertex) or tree.has_cycle_through(edge.to_vertex):
        tree.remove_edge(edge.from_vertex, edge.to_vertex)
        return False
    return True


def kruskal(graph: ArrayGraph) -> ArrayGraph:
    """Return a minimum spanning tree (a forest if graph is not connected)."""
    tree = ArrayGraph(graph.max_vertex_count, graph.graph_type)
    for vertex in range(graph.max_vertex_count):
        if graph.is_valid_vertex(vertex):
            tree.add_vertex(vertex)
    heap = kruskal_heap(graph)
    accepted = 0
    while heap and accepted < graph.vertex_count - 1:
        if kruskal_step(heap, tree):
            accepted += 1
    return tree


def prim(graph: ArrayGraph, start: int = 0) -> ArrayGraph:
    """Return a minimum spanning tree grown from start over its component."""
    tree = ArrayGraph(graph.max_vertex_count, graph.graph_type)
    tree.add_vertex(start)
    while tree.vertex_count < graph.vertex_count:
        heap = EdgeHeap()
        for vertex in range(tree.max_vertex_count):
            if tree.is_valid_vertex(vertex):
                prim_heap(heap, graph, tree, vertex)
        while heap:
            edge = heap.pop()
            if not tree.is_valid_vertex(edge.to_vertex):
                tree.add_vertex(edge.to_vertex)
            tree.add_edge(edge.from_vertex, edge.to_vertex, edge.weight)
            if not tree.has_cycle_through(edge.to_vertex):
                break
            tree.remove_edge(edge.from_vertex, edge.to_vertex)
        else:
            break
    return tree
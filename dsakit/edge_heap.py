"""A min-heap of weighted edges used by the spanning-tree builders."""

from __future__ import annotations

from dataclasses import dataclass

from dsakit.graph import ArrayGraph


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertex ids."""

    weight: int
    from_vertex: int
    to_vertex: int


class EdgeHeap:
    """Binary min-heap ordered by edge weight."""

    def __init__(self) -> None:
        self._slots: list[Edge] = []

    def push(self, edge: Edge) -> None:
        """Add an edge, swapping it upward while its parent is heavier."""
        slots = self._slots
        slots.append(edge)
        index = len(slots) - 1
        while index > 0:
            parent = (index - 1) // 2
            if slots[parent].weight <= slots[index].weight:
                break
            slots[parent], slots[index] = slots[index], slots[parent]
            index = parent

    def pop(self) -> Edge:
        """Remove and return the lightest edge."""
        if not self._slots:
            raise IndexError("pop from empty heap")
        slots = self._slots
        root = slots[0]
        last = slots.pop()
        if slots:
            slots[0] = last
            self._sift_down()
        return root

    def _sift_down(self) -> None:
        slots = self._slots
        index = 0
        while True:
            left = index * 2 + 1
            if left >= len(slots):
                return
            right = left + 1
            child = left
            if right < len(slots) and slots[left].weight > slots[right].weight:
                child = right
            if slots[index].weight <= slots[child].weight:
                return
            slots[index], slots[child] = slots[child], slots[index]
            index = child

    def weights(self) -> list[int]:
        """Return the edge weights in array order, root first."""
        return [edge.weight for edge in self._slots]

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"EdgeHeap({self._slots!r})"


def kruskal_heap(graph: ArrayGraph) -> EdgeHeap:
    """Return a heap of every positive edge in the upper triangle of the matrix."""
    heap = EdgeHeap()
    size = graph.max_vertex_count
    for row in range(size):
        for column in range(row, size):
            weight = graph.weight(row, column)
            if weight > 0:
                heap.push(Edge(weight, row, column))
    return heap


def prim_heap(heap: EdgeHeap, graph: ArrayGraph, tree: ArrayGraph, vertex_id: int) -> None:
    """Push the edges leaving vertex_id in graph that tree does not already hold."""
    for other in range(graph.max_vertex_count):
        weight = graph.weight(vertex_id, other)
        if weight > 0 and tree.weight(vertex_id, other) <= 0:
            heap.push(Edge(weight, vertex_id, other))
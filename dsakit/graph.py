"""A weighted graph stored as an adjacency matrix."""

from __future__ import annotations

from enum import Enum

INFINITY = 2**31 - 1
"""Distance marker for a vertex that cannot be reached."""

_RULE = "=" * 28


class GraphType(Enum):
    """Whether an edge joins its endpoints in both directions or only one."""

    UNDIRECTED = 1
    DIRECTED = 2


class GraphError(Exception):
    """Raised for an invalid vertex or an impossible graph operation."""


class ArrayGraph:
    """Graph over vertex ids ``0 .. max_vertex_count - 1``.

    A weight of 0 in the matrix means there is no edge.
    """

    def __init__(
        self, max_vertex_count: int, graph_type: GraphType = GraphType.UNDIRECTED
    ) -> None:
        if max_vertex_count < 0:
            raise ValueError("max_vertex_count must not be negative")
        self.max_vertex_count = max_vertex_count
        self.graph_type = graph_type
        self._edges = [[0] * max_vertex_count for _ in range(max_vertex_count)]
        self._used = [False] * max_vertex_count
        self._count = 0

    @property
    def vertex_count(self) -> int:
        """Number of vertices currently in the graph."""
        return self._count

    def _check_range(self, vertex_id: int) -> None:
        if not 0 <= vertex_id < self.max_vertex_count:
            raise GraphError(f"vertex {vertex_id} is out of range")

    def _require(self, *vertex_ids: int) -> None:
        for vertex_id in vertex_ids:
            if not self.is_valid_vertex(vertex_id):
                raise GraphError(f"vertex {vertex_id} is not in the graph")

    def is_empty(self) -> bool:
        """Return True when the graph has no vertices."""
        return self._count == 0

    def add_vertex(self, vertex_id: int) -> None:
        """Add a vertex; it must be in range and not yet present."""
        if self._count == self.max_vertex_count:
            raise GraphError("graph is full")
        self._check_range(vertex_id)
        if self._used[vertex_id]:
            raise GraphError(f"vertex {vertex_id} already exists")
        self._used[vertex_id] = True
        self._count += 1

    def add_edge(self, from_id: int, to_id: int, weight: int) -> None:
        """Set the weight of the edge between two existing vertices."""
        self._require(from_id, to_id)
        self._edges[from_id][to_id] = weight
        if self.graph_type is GraphType.UNDIRECTED:
            self._edges[to_id][from_id] = weight

    def is_valid_vertex(self, vertex_id: int) -> bool:
        """Return True when vertex_id is in range and present."""
        return 0 <= vertex_id < self.max_vertex_count and self._used[vertex_id]

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex together with every edge touching it."""
        self._require(vertex_id)
        for other in range(self.max_vertex_count):
            self._edges[vertex_id][other] = 0
            self._edges[other][vertex_id] = 0
        self._used[vertex_id] = False
        self._count -= 1

    def remove_edge(self, from_id: int, to_id: int) -> None:
        """Clear the edge between two existing vertices."""
        self._require(from_id, to_id)
        self._edges[from_id][to_id] = 0
        if self.graph_type is GraphType.UNDIRECTED:
            self._edges[to_id][from_id] = 0

    def weight(self, from_id: int, to_id: int) -> int:
        """Return the stored weight from one vertex to another (0 if no edge)."""
        self._check_range(from_id)
        self._check_range(to_id)
        return self._edges[from_id][to_id]

    def neighbours(self, vertex_id: int) -> list[int]:
        """Return, in ascending order, the vertices reached by a positive edge."""
        self._check_range(vertex_id)
        return [other for other, weight in enumerate(self._edges[vertex_id]) if weight > 0]

    def has_cycle_through(self, vertex_id: int) -> bool:
        """Return True if a depth-first walk from vertex_id leads back to it.

        The edge just walked along is never counted as a way back.
        """
        self._check_range(vertex_id)
        visited: set[int] = set()

        def search(parent: int | None, vertex: int) -> bool:
            if vertex in visited:
                return False
            visited.add(vertex)
            for other in self.neighbours(vertex):
                if other != parent and other == vertex_id:
                    return True
                if search(vertex, other):
                    return True
            return False

        return search(None, vertex_id)

    def render(self) -> str:
        """Return a text picture of the counts and the adjacency matrix."""
        size = self.max_vertex_count
        lines = [
            _RULE,
            f"current graph max count : {size}",
            f"current graph current count : {self._count}",
            "    " + " ".join(str(column) for column in range(size)),
        ]
        for row_id, row in enumerate(self._edges):
            cells = "".join(
                "∞ " if weight == INFINITY else f"{weight} " for weight in row
            )
            lines.append(f"{row_id} : {cells}")
        lines.append(_RULE)
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return (
            f"ArrayGraph(max_vertex_count={self.max_vertex_count}, "
            f"graph_type={self.graph_type.name})"
        )
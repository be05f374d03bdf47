import pytest

from dsakit.graph import INFINITY, ArrayGraph, GraphError
from dsakit.shortest_path import all_pairs, dijkstra, format_distances

DEMO_EDGES = [(0, 1, 1), (1, 2, 2), (2, 0, 4), (2, 3, 1), (3, 4, 8), (3, 5, 3), (4, 5, 4)]


def _graph(edges, size=6):
    graph = ArrayGraph(size)
    for vertex in range(size):
        graph.add_vertex(vertex)
    for start, end, weight in edges:
        graph.add_edge(start, end, weight)
    return graph


def test_source_distance_is_zero():
    distances = dijkstra(_graph(DEMO_EDGES), 3)
    assert distances[3] == 0
    assert len(distances) == 6


def test_demo_distances():
    assert dijkstra(_graph(DEMO_EDGES), 0) == [0, 1, 3, 4, 11, 7]


def test_direct_edge_distance():
    distances = dijkstra(_graph([(0, 1, 7)], size=2), 0)
    assert distances == [0, 7]


def test_unreachable_is_infinity():
    distances = dijkstra(_graph([(0, 1, 2)], size=3), 0)
    assert distances[2] == INFINITY


def test_distances_bounded_by_edges():
    graph = _graph(DEMO_EDGES)
    distances = dijkstra(graph, 0)
    for start, end, weight in DEMO_EDGES:
        if start == 0:
            assert distances[end] <= weight


def test_invalid_source():
    with pytest.raises(GraphError):
        dijkstra(_graph(DEMO_EDGES), 6)


def test_all_pairs_rows_match_single_source():
    graph = _graph(DEMO_EDGES)
    rows = all_pairs(graph)
    assert len(rows) == 6
    assert all(rows[vertex][vertex] == 0 for vertex in range(6))
    assert rows[2] == dijkstra(graph, 2)


def test_format_distances():
    assert format_distances([0, INFINITY, 5], 1) == "1 : 0\t∞\t5\t"


def test_format_distances_empty():
    assert format_distances([], 0) == "0 : "
import pytest

from graph import Graph, OutOfRangeVertex, DEFAULT_EDGES


def test_default_graph_adjacency(graph):
    assert graph.vertex_count == 9
    assert graph.neighbours_of(0) == (1, 7)
    assert graph.neighbours_of(2) == (1, 3, 5, 8)
    assert graph.neighbours_of(5) == (2, 3, 4, 6)
    assert graph.neighbours_of(7) == (0, 1, 6, 8)


def test_adjacency_is_symmetric(graph):
    for u in graph.vertex_ids():
        for v in graph.neighbours_of(u):
            assert u in graph.neighbours_of(v)


def test_edges_listed_once(graph):
    edges = graph.edges()
    assert len(edges) == len(DEFAULT_EDGES)
    assert edges == sorted(tuple(sorted(e)) for e in DEFAULT_EDGES)


def test_neighbours_sorted_and_deduplicated_regardless_of_insertion_order():
    g = Graph(4, [(2, 0), (0, 3), (1, 0), (0, 1), (0, 2)])
    assert g.neighbours_of(0) == (1, 2, 3)
    assert g.neighbours_of(1) == (0,)
    assert g.degree(0) == 3


def test_isolated_vertex_has_no_neighbours(island_graph):
    assert island_graph.neighbours_of(3) == ()


@pytest.mark.parametrize("v", [-1, 9, 100])
def test_neighbours_of_out_of_range(graph, v):
    with pytest.raises(OutOfRangeVertex) as info:
        graph.neighbours_of(v)
    assert info.value.vertex == v
    assert info.value.vertex_count == 9


@pytest.mark.parametrize("v, expected", [
    (0, True), (8, True), (-1, False), (9, False), ("3", False), (True, False), (1.0, False),
])
def test_is_valid_vertex(graph, v, expected):
    assert graph.is_valid_vertex(v) is expected


def test_edge_endpoint_out_of_range_rejected():
    with pytest.raises(OutOfRangeVertex):
        Graph(3, [(0, 3)])


def test_vertex_count_must_be_positive():
    with pytest.raises(ValueError):
        Graph(0)


def test_single_vertex_graph():
    g = Graph(1)
    assert g.vertex_ids() == [0]
    assert g.neighbours_of(0) == ()
    assert len(g) == 1


def test_to_dict_uses_string_keys(graph):
    adj = graph.to_dict()
    assert sorted(adj, key=int) == [str(v) for v in range(9)]
    assert adj["3"] == [2, 4, 5]

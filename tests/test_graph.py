import pytest

from graphserve.graph import Graph, GraphError


def triangle():
    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 0)
    return g


@pytest.mark.parametrize("size", [0, -1, -10])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        Graph(size)


def test_len_is_vertex_count():
    assert len(Graph(7)) == 7


def test_add_edge_is_symmetric():
    g = Graph(4)
    g.add_edge(1, 3)
    assert g.has_edge(1, 3)
    assert g.has_edge(3, 1)
    assert not g.has_edge(0, 1)


def test_self_loop_rejected():
    with pytest.raises(ValueError):
        Graph(3).add_edge(1, 1)


def test_duplicate_edge_rejected():
    g = Graph(3)
    g.add_edge(0, 2)
    with pytest.raises(GraphError):
        g.add_edge(2, 0)


@pytest.mark.parametrize("u,v", [(-1, 0), (0, 3), (5, 1)])
def test_add_edge_out_of_range(u, v):
    with pytest.raises(IndexError):
        Graph(3).add_edge(u, v)


def test_remove_edge():
    g = triangle()
    g.remove_edge(1, 0)
    assert not g.has_edge(0, 1)
    assert g.has_edge(1, 2)


def test_remove_missing_edge_raises():
    with pytest.raises(GraphError):
        Graph(3).remove_edge(0, 1)


def test_remove_edge_out_of_range():
    with pytest.raises(IndexError):
        Graph(3).remove_edge(0, 3)


def test_has_edge_out_of_range_is_false():
    g = triangle()
    assert g.has_edge(-1, 0) is False
    assert g.has_edge(0, 3) is False


def test_degree_and_neighbors():
    g = Graph(4)
    g.add_edge(0, 3)
    g.add_edge(0, 1)
    assert g.degree(0) == 2
    assert g.degree(2) == 0
    assert g.neighbors(0) == [1, 3]


def test_degree_out_of_range():
    with pytest.raises(IndexError):
        Graph(2).degree(2)


def test_neighbors_out_of_range():
    with pytest.raises(IndexError):
        Graph(2).neighbors(-1)


def test_adjacency_matrix_matches_edges_and_is_a_copy():
    g = Graph(3)
    g.add_edge(0, 1)
    matrix = g.adjacency_matrix()
    assert matrix == [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    matrix[2][0] = 1
    assert not g.has_edge(2, 0)


def test_copy_is_independent():
    g = triangle()
    clone = g.copy()
    clone.remove_edge(0, 1)
    assert g.has_edge(0, 1)
    assert not clone.has_edge(0, 1)
    assert len(clone) == len(g)


def test_random_generation_edge_count():
    g = Graph(10)
    g.generate_random_undirected(20, 7)
    assert sum(g.degree(v) for v in range(10)) == 40


def test_random_generation_reproducible():
    a = Graph(8)
    b = Graph(8)
    a.generate_random_undirected(12, 42)
    b.generate_random_undirected(12, 42)
    assert a.adjacency_matrix() == b.adjacency_matrix()


def test_random_generation_maximum_is_complete():
    g = Graph(5)
    g.generate_random_undirected(10, 3)
    assert all(g.degree(v) == 4 for v in range(5))


def test_random_generation_too_many_edges():
    with pytest.raises(GraphError):
        Graph(4).generate_random_undirected(7, 1)


def test_random_generation_zero_edges():
    g = Graph(4)
    g.generate_random_undirected(0, 1)
    assert all(g.degree(v) == 0 for v in range(4))


def test_format_adjacency():
    g = Graph(2)
    g.add_edge(0, 1)
    assert g.format_adjacency() == (
        "Adjacency Matrix (2 vertices):\n   0 1 \n0: 0 1 \n1: 1 0 \n"
    )


def test_format_matrix():
    g = Graph(2)
    g.add_edge(0, 1)
    assert g.format_matrix() == "Adjacency Matrix:\n0 1 \n1 0 \n"
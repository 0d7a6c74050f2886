import pytest

from dsakit.graph import count_provinces, dfs_traversal, has_cycle, undirected_adjacency

SOURCE_EDGES = [
    (1, 2), (1, 3), (1, 4), (1, 5), (2, 4),
    (2, 1), (3, 1), (4, 1), (4, 2), (5, 1),
]


def test_undirected_adjacency_adds_both_directions():
    adjacency = undirected_adjacency(3, [(1, 2), (2, 3)])
    assert adjacency == [[], [2], [1, 3], [2]]


def test_undirected_adjacency_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        undirected_adjacency(2, [(1, 3)])


def test_undirected_adjacency_rejects_negative_count():
    with pytest.raises(ValueError):
        undirected_adjacency(-1, [])


def test_dfs_traversal_source_example():
    assert dfs_traversal(5, SOURCE_EDGES) == [1, 2, 4, 3, 5]


def test_dfs_traversal_visits_every_vertex_once():
    order = dfs_traversal(6, [(1, 2), (4, 5)])
    assert sorted(order) == [1, 2, 3, 4, 5, 6]
    assert order[0] == 1


def test_dfs_traversal_components_start_at_lowest_unvisited():
    order = dfs_traversal(4, [(3, 4), (1, 2)])
    assert order == [1, 2, 3, 4]


def test_dfs_traversal_empty_graph():
    assert dfs_traversal(0, []) == []


def test_has_cycle_source_example():
    edges = [(0, 1), (1, 2), (1, 5), (2, 3), (3, 4), (4, 0), (4, 1)]
    adjacency = undirected_adjacency(5, edges)
    assert has_cycle(adjacency) is True


def test_has_cycle_directed_chain_is_acyclic():
    assert has_cycle([[1], [2], []]) is False


def test_has_cycle_directed_loop():
    assert has_cycle([[1], [2], [0]]) is True


def test_has_cycle_diamond_is_acyclic():
    assert has_cycle([[1, 2], [3], [3], []]) is False


def test_has_cycle_self_loop():
    assert has_cycle([[0]]) is True


def test_count_provinces_source_matrix():
    matrix = [[1, 0, 1], [0, 1, 0], [1, 0, 1]]
    assert count_provinces(matrix) == 2


def test_count_provinces_all_isolated():
    matrix = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert count_provinces(matrix) == len(matrix)


def test_count_provinces_fully_connected():
    assert count_provinces([[1, 1], [1, 1]]) == 1


def test_count_provinces_empty():
    assert count_provinces([]) == 0


def test_count_provinces_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        count_provinces([[1, 0], [0]])
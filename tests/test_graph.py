import pytest

from dsalgo.graph import (
    INFINITY,
    ShortestPath,
    format_matrix,
    multiply,
    path_matrix,
    power_matrix,
    shortest_path,
    to_boolean,
)


@pytest.fixture
def weighted():
    return [
        [0, 2, 10, 0],
        [0, 0, 3, 7],
        [0, 0, 0, 1],
        [0, 0, 0, 0],
    ]


def test_direct_edge():
    adj = [[0, 6], [0, 0]]
    result = shortest_path(adj, 0, 1)
    assert result == ShortestPath(adj[0][1], (0, 1))


def test_prefers_cheaper_indirect_route(weighted):
    result = shortest_path(weighted, 0, 2)
    assert result.path == (0, 1, 2)
    assert result.distance == weighted[0][1] + weighted[1][2]
    assert result.distance < weighted[0][2]


def test_distance_matches_edges_along_path(weighted):
    result = shortest_path(weighted, 0, 3)
    assert result.path[0] == 0
    assert result.path[-1] == 3
    edges = zip(result.path, result.path[1:])
    assert result.distance == sum(weighted[u][v] for u, v in edges)


def test_unreachable_returns_none(weighted):
    assert shortest_path(weighted, 3, 0) is None


def test_same_node():
    assert shortest_path([[0, 1], [1, 0]], 1, 1) == ShortestPath(0, (1,))


def test_infinite_weight_is_unreachable():
    assert shortest_path([[0, INFINITY], [0, 0]], 0, 1) is None


@pytest.mark.parametrize("source,dest", [(-1, 0), (0, 2), (5, 1)])
def test_out_of_range_nodes(source, dest):
    with pytest.raises(ValueError):
        shortest_path([[0, 1], [1, 0]], source, dest)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        shortest_path([[0, 1, 2], [1, 0, 3]], 0, 1)


def test_multiply_by_identity(weighted):
    identity = [[int(i == j) for j in range(4)] for i in range(4)]
    assert multiply(weighted, identity) == weighted
    assert multiply(identity, weighted) == weighted


def test_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_power_matrix(weighted):
    assert power_matrix(weighted, 1) == weighted
    square = power_matrix(weighted, 2)
    assert square == multiply(weighted, weighted)
    assert power_matrix(weighted, 3) == multiply(square, weighted)


def test_power_matrix_returns_copy(weighted):
    result = power_matrix(weighted, 1)
    result[0][0] = 42
    assert weighted[0][0] == 0


def test_to_boolean(weighted):
    result = to_boolean(weighted)
    for row, bool_row in zip(weighted, result):
        for value, flag in zip(row, bool_row):
            assert flag == (1 if value else 0)


def test_path_matrix_chain():
    chain = [[0, 5, 0], [0, 0, 4], [0, 0, 0]]
    paths = path_matrix(chain)
    assert paths[0][2] == 1
    assert paths[0][1] == 1
    assert paths[2][0] == 0
    assert paths[1][0] == 0


def test_path_matrix_cycle_reaches_everything():
    cycle = [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
    paths = path_matrix(cycle)
    assert all(value == 1 for row in paths for value in row)


def test_format_matrix():
    assert format_matrix([[1, 2], [3, 4]], 3) == "  1  2\n  3  4"


def test_format_matrix_default_width():
    lines = format_matrix([[7, 8, 9]]).splitlines()
    assert len(lines) == 1
    assert len(lines[0]) == 12
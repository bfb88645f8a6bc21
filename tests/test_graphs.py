import math

import pytest

from dsakit.graphs import (
    Graph,
    adjacency_matrix,
    format_matrix,
    multistage_shortest_path,
    remove_edge,
)

INF = math.inf

MULTISTAGE = [
    [INF, 1, 2, 5, INF, INF, INF, INF],
    [INF, INF, INF, INF, 4, 11, INF, INF],
    [INF, INF, INF, INF, 9, 5, 16, INF],
    [INF, INF, INF, INF, INF, INF, 2, INF],
    [INF, INF, INF, INF, INF, INF, INF, 18],
    [INF, INF, INF, INF, INF, INF, INF, 13],
    [INF, INF, INF, INF, INF, INF, INF, 2],
    [INF, INF, INF, INF, INF, INF, INF, INF],
]

SAMPLE_EDGES = [(0, 1, 2), (0, 2, 3), (1, 2, 15), (1, 3, 2), (2, 4, 13), (3, 4, 9)]

BFS_ORDER = [0, 1, 2, 5, 3, 4, 6]
DFS_ORDER = [0, 1, 5, 6, 4, 2, 3]


def _search_graph():
    graph = Graph()
    for value in range(7):
        graph.add_vertex(value)
    for start, end in [(0, 1), (0, 2), (1, 5), (2, 3), (3, 4), (4, 6), (5, 6), (2, 4)]:
        graph.add_edge(start, end)
    return graph


def test_bfs_order():
    assert _search_graph().bfs() == BFS_ORDER


def test_dfs_order():
    assert _search_graph().dfs() == DFS_ORDER


def test_searches_visit_each_vertex_once():
    graph = _search_graph()
    for order in (graph.bfs(), graph.dfs()):
        assert sorted(order) == list(range(7))
        assert order[0] == 0


def test_searches_are_repeatable():
    graph = _search_graph()
    assert [graph.bfs(), graph.bfs()] == [BFS_ORDER, BFS_ORDER]
    assert [graph.dfs(), graph.dfs()] == [DFS_ORDER, DFS_ORDER]
    assert graph.bfs() == BFS_ORDER


def test_search_reaches_only_component_of_first_vertex():
    graph = Graph()
    for label in "abcd":
        graph.add_vertex(label)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    assert graph.bfs() == ["a", "b"]
    assert graph.dfs() == ["a", "b"]
    assert len(graph) == 4


def test_empty_graph_search():
    graph = Graph()
    assert graph.bfs() == []
    assert graph.dfs() == []


def test_add_vertex_returns_index():
    graph = Graph()
    assert graph.add_vertex("x") == 0
    assert graph.add_vertex("y") == 1


def test_add_edge_rejects_unknown_vertex():
    graph = Graph()
    graph.add_vertex("x")
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)


def test_adjacency_matrix_is_symmetric():
    matrix = adjacency_matrix(5, SAMPLE_EDGES)
    for u, v, weight in SAMPLE_EDGES:
        assert matrix[u][v] == weight
        assert matrix[v][u] == weight
    assert all(matrix[i][j] == matrix[j][i] for i in range(5) for j in range(5))
    assert all(matrix[i][i] == 0 for i in range(5))


def test_adjacency_matrix_rejects_bad_vertex():
    with pytest.raises(IndexError):
        adjacency_matrix(3, [(0, 5, 1)])


def test_remove_edge():
    matrix = adjacency_matrix(5, SAMPLE_EDGES)
    remove_edge(matrix, 3, 1)
    assert matrix[1][3] == 0
    assert matrix[3][1] == 0
    assert matrix[0][1] == 2


def test_format_matrix_layout():
    matrix = adjacency_matrix(5, SAMPLE_EDGES)
    lines = format_matrix(matrix).splitlines()
    assert len(lines) == 5
    for line, row in zip(lines, matrix):
        assert len(line) == 4 * len(row)
        assert [int(field) for field in line.split()] == row


def test_multistage_shortest_path():
    assert multistage_shortest_path(MULTISTAGE) == 9


def test_multistage_distance_from_middle_vertex():
    sub = [row[2:] for row in MULTISTAGE[2:]]
    assert multistage_shortest_path(sub) == 18


def test_multistage_accepts_none_for_missing_edges():
    graph = [[None if w == INF else w for w in row] for row in MULTISTAGE]
    assert multistage_shortest_path(graph) == multistage_shortest_path(MULTISTAGE)


def test_multistage_unreachable_end():
    assert multistage_shortest_path([[None, None], [None, None]]) == math.inf


def test_multistage_single_vertex():
    assert multistage_shortest_path([[None]]) == 0


def test_multistage_rejects_backward_edge():
    with pytest.raises(ValueError):
        multistage_shortest_path([[None, 1], [None, None], [None, None]][:2] + [[4, None]])


def test_multistage_rejects_non_square():
    with pytest.raises(ValueError):
        multistage_shortest_path([[None, 1], [None]])


def test_multistage_rejects_empty():
    with pytest.raises(ValueError):
        multistage_shortest_path([])
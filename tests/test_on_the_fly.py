import pytest

from waterjug.full_graph import solve_full_graph
from waterjug.graph import Graph
from waterjug.on_the_fly import next_states, solve_on_the_fly


def test_next_states_from_start_are_the_two_fills():
    visited = {(0, 0)}
    result = next_states((0, 0), 5, 3, visited)
    assert result == [(0, 3), (5, 0)]
    assert visited == {(0, 0), (0, 3), (5, 0)}


def test_next_states_skips_visited():
    visited = {(0, 0), (5, 0)}
    assert next_states((0, 0), 5, 3, visited) == [(0, 3)]


def test_next_states_returns_nothing_twice():
    visited = {(0, 0)}
    next_states((0, 0), 5, 3, visited)
    assert next_states((0, 0), 5, 3, visited) == []


@pytest.mark.parametrize("state", [(2, 1), (5, 3), (0, 3), (4, 0), (1, 2)])
def test_next_states_match_full_graph_neighbors(state):
    visited: set = set()
    result = next_states(state, 5, 3, visited)
    assert result == sorted(set(Graph(5, 3).neighbors(state)))
    assert result == sorted(result)


@pytest.mark.parametrize(
    "large, small, target",
    [(5, 3, 4), (5, 3, 1), (7, 4, 6), (9, 4, 6), (4, 2, 2), (5, 3, 0), (6, 1, 6)],
)
def test_same_path_as_full_graph(large, small, target):
    assert solve_on_the_fly(large, small, target) == solve_full_graph(large, small, target)


@pytest.mark.parametrize("large, small, target", [(5, 3, 4), (7, 4, 6), (9, 4, 1)])
def test_path_is_made_of_legal_moves(large, small, target):
    path = solve_on_the_fly(large, small, target)
    graph = Graph(large, small)
    assert path[0] == (0, 0)
    assert path[-1] == (target, 0)
    for source, dest in zip(path, path[1:]):
        assert dest in graph.neighbors(source)


def test_unreachable_target_gives_none():
    assert solve_on_the_fly(4, 2, 3) is None


def test_target_zero_is_already_reached():
    assert solve_on_the_fly(5, 3, 0) == [(0, 0)]
import pytest

from hamiltonian_graph import Graph

CYCLE_5 = [[1, 4], [0, 2], [1, 3], [2, 4], [3, 0]]


@pytest.fixture
def cycle_graph():
    return Graph.from_adjacency(5, CYCLE_5)


@pytest.fixture
def path_graph():
    return Graph.from_adjacency(3, [[1], [0, 2], [1]])


@pytest.fixture
def star_graph():
    return Graph.from_adjacency(4, [[1, 2, 3]])


@pytest.fixture
def random_graph():
    return Graph(12, 4, seed=7)


def assert_simple_path(graph, positions):
    assert len(positions) == len(set(positions))
    for a, b in zip(positions, positions[1:]):
        assert graph.nodes[a].is_linked(graph.nodes[b])

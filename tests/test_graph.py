import networkx as nx
import pytest

from hamiltonian_graph import (
    Graph,
    InvalidConfigurationError,
    Node,
    new_graph_from_adjacency,
    new_random_graph,
)


class TestRandomGraph:

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_adjacency_is_symmetric(self, seed):
        graph = new_random_graph(15, 6, seed=seed)
        for a in graph.nodes:
            for b in graph.nodes:
                assert a.is_linked(b) == b.is_linked(a)

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_no_self_loops(self, seed):
        graph = new_random_graph(10, 9, seed=seed)
        for node in graph.nodes:
            assert node.linked_nodes[node.position] is None

    @pytest.mark.parametrize("size", [1, 2, 3, 10])
    def test_max_edges_must_be_below_size(self, size):
        with pytest.raises(InvalidConfigurationError):
            new_random_graph(size, size)
        with pytest.raises(InvalidConfigurationError):
            new_random_graph(size, size + 3)

    def test_rejects_empty_and_negative(self):
        with pytest.raises(InvalidConfigurationError):
            Graph(0)
        with pytest.raises(InvalidConfigurationError):
            Graph(5, -1)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            Graph(3, 3)

    def test_default_max_edges_is_half_the_size(self):
        assert Graph(10).max_edges == 5
        assert Graph(1).max_edges == 0

    def test_max_paths_drawn_within_cap(self):
        graph = Graph(30, 4, seed=11)
        assert all(1 <= node.max_paths <= 4 for node in graph.nodes)

    def test_every_node_gets_an_edge(self):
        graph = Graph(25, 3, seed=5)
        assert all(node.degree() >= 1 for node in graph.nodes)

    def test_zero_max_edges_has_no_links(self):
        graph = Graph(4, 0, seed=1)
        assert graph.edge_count == 0

    def test_same_seed_same_graph(self):
        first = Graph(20, 5, seed=42)
        second = Graph(20, 5, seed=42)
        assert str(first) == str(second)


class TestManualGraph:

    def test_links_from_one_side_are_mutual(self):
        graph = new_graph_from_adjacency(3, [[1, 2]])
        assert graph.nodes[1].is_linked(graph.nodes[0])
        assert graph.nodes[2].is_linked(graph.nodes[0])
        assert not graph.nodes[1].is_linked(graph.nodes[2])

    def test_degree_and_edge_count(self, cycle_graph):
        assert [node.degree() for node in cycle_graph.nodes] == [2, 2, 2, 2, 2]
        assert cycle_graph.edge_count == 5

    def test_existing_linked_nodes_in_position_order(self, cycle_graph):
        assert [n.position for n in cycle_graph.nodes[0].existing_linked_nodes()] == [1, 4]

    def test_self_loop_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Graph.from_adjacency(3, [[0]])

    def test_unknown_position_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Graph.from_adjacency(3, [[5]])

    def test_constructor_accepts_node_paths(self):
        graph = Graph(3, node_paths=[[1], [2]])
        assert graph.max_edges == 2
        assert [node.max_paths for node in graph.nodes] == [1, 2, 1]
        assert str(graph) == str(Graph.from_adjacency(3, [[1], [2]]))

    def test_node_paths_still_checks_max_edges(self):
        with pytest.raises(InvalidConfigurationError):
            Graph(3, max_edges=3, node_paths=[[1]])
        with pytest.raises(InvalidConfigurationError):
            Graph(0, node_paths=[])

    def test_too_many_adjacency_lists_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Graph.from_adjacency(2, [[1], [0], [0]])

    def test_is_hamiltonian_path(self, cycle_graph):
        assert cycle_graph.is_hamiltonian_path([0, 1, 2, 3, 4])
        assert cycle_graph.is_hamiltonian_path([2, 1, 0, 4, 3])
        assert not cycle_graph.is_hamiltonian_path([0, 2, 1, 3, 4])
        assert not cycle_graph.is_hamiltonian_path([0, 1, 2, 3])
        assert not cycle_graph.is_hamiltonian_path([0, 1, 2, 3, 3])

    def test_str_lists_adjacency_and_totals(self, cycle_graph):
        text = str(cycle_graph)
        assert "Node 0, connected to:\t1, 4" in text
        assert "Graph has a total of 5 nodes and 5 edges." in text


class TestLinking:

    def test_relinking_is_idempotent(self):
        a, b = Node(3, 0), Node(3, 1)
        a.link_node(b)
        before = (list(a.linked_nodes), list(b.linked_nodes))
        a.link_node(b)
        b.link_node(a)
        assert (a.linked_nodes, b.linked_nodes) == before
        assert a.degree() == 1 and b.degree() == 1

    def test_node_cannot_link_itself(self):
        a = Node(2, 0)
        with pytest.raises(InvalidConfigurationError):
            a.link_node(a)


class TestNetworkxInterop:

    def test_to_networkx(self, cycle_graph):
        nx_graph = cycle_graph.to_networkx()
        assert nx_graph.number_of_nodes() == 5
        assert nx_graph.number_of_edges() == 5
        assert nx.is_isomorphic(nx_graph, nx.cycle_graph(5))

    def test_from_networkx_relabels_nodes(self):
        nx_graph = nx.Graph()
        nx_graph.add_edges_from([("a", "b"), ("b", "c")])
        graph = Graph.from_networkx(nx_graph)
        assert graph.size == 3
        assert graph.edge_count == 2
        assert graph.is_hamiltonian_path([0, 1, 2])

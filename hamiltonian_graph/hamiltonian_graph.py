import random
from typing import Iterable, List, Optional, Sequence

import networkx as nx


class InvalidConfigurationError(ValueError):
    pass


class Node:
    def __init__(self, graph_size: int, position: int, max_paths: int = 0):
        self.position = position
        self.max_paths = max_paths
        # slot i holds the node at position i when linked, otherwise None
        self.linked_nodes: List[Optional["Node"]] = [None] * graph_size

    def __repr__(self):
        return f"Node({self.position})"

    def link_node(self, target: "Node"):
        """Link this node and ``target`` to each other. Linking twice is a no-op."""
        if target is self:
            raise InvalidConfigurationError(f"Node {self.position} cannot be linked to itself")
        if self.linked_nodes[target.position] is target:
            return
        self.linked_nodes[target.position] = target
        target.linked_nodes[self.position] = self

    def is_linked(self, target: "Node") -> bool:
        return self.linked_nodes[target.position] is target

    def existing_linked_nodes(self) -> List["Node"]:
        return [node for node in self.linked_nodes if node is not None]

    def degree(self) -> int:
        return sum(1 for node in self.linked_nodes if node is not None)


class Graph:
    def __init__(
        self,
        size: int,
        max_edges: Optional[int] = None,
        seed=None,
        node_paths: Optional[Sequence[Iterable[int]]] = None,
    ):
        """Build a random graph, or one linked exactly as ``node_paths`` says.

        ``node_paths[i]`` lists the positions node ``i`` is linked to. Links are
        mutual, so each edge only needs to appear on one side.
        """
        if size < 1:
            raise InvalidConfigurationError("Graph must have at least one node")
        if max_edges is None:
            max_edges = size // 2 if node_paths is None else size - 1
        if max_edges >= size:
            raise InvalidConfigurationError("Number of edges must be less than the number of nodes!")
        if max_edges < 0:
            raise InvalidConfigurationError("Number of edges cannot be negative")

        self.max_edges = max_edges
        self._rand = random.Random(seed)
        self.nodes: List[Node] = []
        if node_paths is None:
            self._generate(size)
        else:
            self._generate_from_paths(size, node_paths)

    @classmethod
    def from_adjacency(cls, size: int, node_paths: Sequence[Iterable[int]]) -> "Graph":
        return cls(size, node_paths=node_paths)

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> "Graph":
        n = nx_graph.number_of_nodes()
        mapping = dict(zip(nx_graph.nodes(), range(n)))
        node_paths = [[] for _ in range(n)]
        for u, v in nx_graph.edges():
            if u != v:
                node_paths[mapping[u]].append(mapping[v])
        return cls.from_adjacency(n, node_paths)

    @property
    def size(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return sum(node.degree() for node in self.nodes) // 2

    def _generate(self, size: int):
        for i in range(size):
            max_paths = self._rand.randint(1, self.max_edges) if self.max_edges > 0 else 0
            self.nodes.append(Node(size, i, max_paths))

        # one pass per node, caps are soft and never retried
        for node in self.nodes:
            for position in self._get_linked_nodes_index(node):
                node.link_node(self.nodes[position])

    def _generate_from_paths(self, size: int, node_paths: Sequence[Iterable[int]]):
        if len(node_paths) > size:
            raise InvalidConfigurationError(
                f"Got adjacency for {len(node_paths)} nodes but the graph only has {size}"
            )

        self.nodes = [Node(size, i) for i in range(size)]
        for i, paths in enumerate(node_paths):
            for position in paths:
                if not 0 <= position < size:
                    raise InvalidConfigurationError(f"Node {i} links to unknown position {position}")
                self.nodes[i].link_node(self.nodes[position])

        for node in self.nodes:
            node.max_paths = node.degree()

    def _get_linked_nodes_index(self, current: Node) -> List[int]:
        open_paths = max(current.max_paths - current.degree(), 0)

        node_indexes = [
            i for i, linked in enumerate(current.linked_nodes)
            if i != current.position and linked is None
        ]
        # drop random positions until only the open paths are left
        while len(node_indexes) > open_paths:
            node_indexes.pop(self._rand.randrange(len(node_indexes)))

        return node_indexes

    def is_hamiltonian_path(self, positions: Sequence[int]) -> bool:
        if len(positions) != self.size or set(positions) != set(range(self.size)):
            return False
        return all(
            self.nodes[a].is_linked(self.nodes[b])
            for a, b in zip(positions, positions[1:])
        )

    def to_networkx(self) -> nx.Graph:
        graph = nx.Graph()
        graph.add_nodes_from(range(self.size))
        graph.add_edges_from(
            (node.position, linked.position)
            for node in self.nodes
            for linked in node.existing_linked_nodes()
            if node.position < linked.position
        )
        return graph

    def __str__(self):
        lines = ["Generated graph with the following nodes:"]
        for node in self.nodes:
            linked = ", ".join(str(n.position) for n in node.existing_linked_nodes())
            lines.append(f"Node {node.position}, connected to:\t{linked}")
        lines.append(f"Graph has a total of {self.size} nodes and {self.edge_count} edges.")
        return "\n".join(lines) + "\n"


def new_random_graph(size: int, max_edges: Optional[int] = None, seed=None) -> Graph:
    return Graph(size, max_edges, seed=seed)


def new_graph_from_adjacency(size: int, node_paths: Sequence[Iterable[int]]) -> Graph:
    return Graph.from_adjacency(size, node_paths)

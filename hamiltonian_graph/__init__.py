from hamiltonian_graph.hamiltonian_graph import (
    Graph,
    InvalidConfigurationError,
    Node,
    new_graph_from_adjacency,
    new_random_graph,
)

__all__ = [
    "Graph",
    "InvalidConfigurationError",
    "Node",
    "new_graph_from_adjacency",
    "new_random_graph",
]

import time
from typing import List

from hamiltonian_graph import Graph, Node
from search_result import SearchResult

NO_EDGES_MESSAGE = "Certain nodes has 0 edges, therefore no Hamiltonian path"


class ExhaustiveSearchSolver:
    def __init__(self, graph: Graph):
        self.graph = graph
        self.n = graph.size

    def search_from_root(self, root: Node, neighbours: List[List[Node]]) -> List[Node]:
        """Depth-first search for a Hamiltonian path starting at ``root``.

        ``path`` and ``unvisited_edges`` share indexes: ``unvisited_edges[i]`` is
        the number of edges of ``path[i]`` not tried yet.
        """
        path = [root]
        unvisited_edges = [len(neighbours[root.position])]
        on_path = {root.position}

        while unvisited_edges[0] > 0 or len(path) > 1:
            current = path[-1]
            remaining = unvisited_edges[-1]

            if remaining > 0:
                current_edges = neighbours[current.position]
                next_node = current_edges[len(current_edges) - remaining]
                unvisited_edges[-1] -= 1
                if next_node.position in on_path:
                    continue
                path.append(next_node)
                unvisited_edges.append(len(neighbours[next_node.position]))
                on_path.add(next_node.position)
            elif len(path) == self.n:
                return path
            else:
                unvisited_edges.pop()
                on_path.discard(path.pop().position)

        return []

    def solve(self) -> SearchResult:
        start = time.perf_counter()
        neighbours = [node.existing_linked_nodes() for node in self.graph.nodes]

        for root in self.graph.nodes:
            # a root without edges ends the whole search, not just this root
            if not neighbours[root.position]:
                return SearchResult(
                    elapsed=time.perf_counter() - start,
                    message=NO_EDGES_MESSAGE,
                )

            path = self.search_from_root(root, neighbours)
            if path:
                return SearchResult(
                    solution=[node.position for node in path],
                    elapsed=time.perf_counter() - start,
                )

        return SearchResult(elapsed=time.perf_counter() - start)


def exhaustive_search(graph: Graph) -> SearchResult:
    return ExhaustiveSearchSolver(graph).solve()

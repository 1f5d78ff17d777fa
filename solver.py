import random
from typing import List, Union

from exhaustive_search import ExhaustiveSearchSolver
from hamiltonian_graph import Graph, Node
from search_result import SearchResult
from tabu_search import RandomStrategy, SelectNext, TabuSearchSolver, greedy_path


class Solver:
    """Runs the Hamiltonian path searches against one graph.

    The graph is only read, so a single ``Solver`` can be reused for any number
    of searches.
    """

    def __init__(self, graph: Graph, seed=None, tabu_match: str = "substring"):
        self.graph = graph
        self.tabu_match = tabu_match
        self._rand = random.Random(seed)

    def ex_search(self) -> SearchResult:
        return ExhaustiveSearchSolver(self.graph).solve()

    def greedy(self) -> List[Node]:
        return greedy_path(self.graph)

    def greedy_tabu(self, iterations: int) -> SearchResult:
        return self.tabu(iterations, "greedy")

    def random_tabu(self, iterations: int) -> SearchResult:
        return self.tabu(iterations, RandomStrategy(self._rand))

    def tabu(self, iterations: int, strategy: Union[str, SelectNext]) -> SearchResult:
        solver = TabuSearchSolver(
            self.graph,
            max_iterations=iterations,
            strategy=strategy,
            seed=self._rand.getrandbits(32),
            tabu_match=self.tabu_match,
        )
        return solver.solve()

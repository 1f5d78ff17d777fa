import random
import sys
import time
from typing import Callable, Collection, List, Optional, Sequence, Union

from hamiltonian_graph import Graph, InvalidConfigurationError, Node
from search_result import SearchResult

SelectNext = Callable[[Sequence[Node], Collection[Node]], Optional[Node]]

TABU_MATCH_MODES = ("substring", "exact")


class GreedyStrategy:
    """Pick the candidate with the most edges that is not excluded."""

    def __call__(self, candidates: Sequence[Node], excluded: Optional[Collection[Node]] = None) -> Optional[Node]:
        if not candidates:
            raise InvalidConfigurationError("List is empty.")

        big_node = None
        for node in candidates:
            if excluded is not None and node in excluded:
                continue
            # only a strictly larger degree replaces the earlier node
            if big_node is None or big_node.degree() < node.degree():
                big_node = node
        return big_node


class RandomStrategy:
    """Pick a uniformly random candidate that is not excluded."""

    def __init__(self, rand: Optional[random.Random] = None):
        self.rand = rand or random.Random()

    def __call__(self, candidates: Sequence[Node], excluded: Optional[Collection[Node]] = None) -> Optional[Node]:
        if not candidates:
            raise InvalidConfigurationError("List is empty.")

        pool = list(candidates)
        while pool:
            node = pool.pop(self.rand.randrange(len(pool)))
            if excluded is None or node not in excluded:
                return node
        return None


def greedy_path(graph: Graph) -> List[Node]:
    """Walk from the highest-degree node, always to the highest-degree unvisited neighbour."""
    if not graph.nodes:
        return []

    select = GreedyStrategy()
    path = [select(graph.nodes)]
    visited = set(path)

    while len(path) < graph.size:
        neighbours = path[-1].existing_linked_nodes()
        if not neighbours:
            break
        next_node = select(neighbours, visited)
        if next_node is None:
            break
        path.append(next_node)
        visited.add(next_node)

    return path


def nodes_to_string_sequence(nodes: Sequence[Node]) -> str:
    return " ".join(str(node.position) for node in nodes)


class TabuSearchSolver:
    def __init__(
        self,
        graph: Graph,
        max_iterations: int = 1000,
        strategy: Union[str, SelectNext] = "greedy",
        seed=None,
        tabu_match: str = "substring",
        verbose: bool = False,
    ):
        if max_iterations < 0:
            raise InvalidConfigurationError("Number of iterations cannot be negative")
        if tabu_match not in TABU_MATCH_MODES:
            raise InvalidConfigurationError(f"Unknown tabu match mode: {tabu_match}")

        self.graph = graph
        self.n = graph.size
        self.max_iterations = max_iterations
        self.tabu_match = tabu_match
        self.verbose = verbose
        self._rand = random.Random(seed)
        self.select_next = self._resolve_strategy(strategy)
        # candidate length after every accepted move, and the tabu list, of the last solve()
        self.length_history: List[int] = []
        self.tabu_history: List[str] = []

    def _resolve_strategy(self, strategy: Union[str, SelectNext]) -> SelectNext:
        if callable(strategy):
            return strategy
        if strategy == "greedy":
            return GreedyStrategy()
        if strategy == "random":
            return RandomStrategy(self._rand)
        raise InvalidConfigurationError(f"Unknown selection strategy: {strategy}")

    def generate_initial_solution(self) -> List[Node]:
        return greedy_path(self.graph)

    def is_tabu(self, sequence: str, tabu_list: List[str]) -> bool:
        if self.tabu_match == "exact":
            return sequence in tabu_list
        # substring membership, so "1" is already tabu once "10 1" is stored
        return any(sequence in entry for entry in tabu_list)

    def build_branch(self, candidate: List[Node], split: int) -> List[Node]:
        source = candidate[split]
        excluded = set(candidate[:split + 1])
        branch = [source]

        next_node = self.select_next(source.existing_linked_nodes(), excluded)
        while next_node is not None:
            branch.append(next_node)
            excluded.add(next_node)
            next_node = self.select_next(next_node.existing_linked_nodes(), excluded)
        return branch

    def solve(self) -> SearchResult:
        start = time.perf_counter()

        candidate = self.generate_initial_solution()
        tabu_list: List[str] = []
        lengths = [len(candidate)]

        iteration = 0
        while iteration < self.max_iterations and len(candidate) < self.n:
            iteration += 1
            split = self._rand.randrange(len(candidate))
            branch = self.build_branch(candidate, split)

            if self.is_tabu(nodes_to_string_sequence(branch), tabu_list):
                continue

            neighbor_solution = candidate[:split] + branch
            if len(neighbor_solution) > len(candidate):
                tabu_list.append(nodes_to_string_sequence(candidate))
                candidate = neighbor_solution
                lengths.append(len(candidate))
                if self.verbose:
                    print(f"Iteration {iteration}: path length {len(candidate)}/{self.n}")
                    sys.stdout.flush()
            else:
                tabu_list.append(nodes_to_string_sequence(neighbor_solution))

        self.length_history = lengths
        self.tabu_history = tabu_list

        if len(candidate) == self.n:
            message = "Best solution is found"
        else:
            message = "No perfect solution found, best approximate alternate solution obtained"

        return SearchResult(
            solution=[node.position for node in candidate],
            elapsed=time.perf_counter() - start,
            message=f"{message} after {iteration} iterations",
            iterations=iteration,
        )


def tabu_search(
    graph: Graph,
    iterations: int,
    strategy: Union[str, SelectNext] = "greedy",
    seed=None,
    tabu_match: str = "substring",
) -> SearchResult:
    solver = TabuSearchSolver(graph, iterations, strategy=strategy, seed=seed, tabu_match=tabu_match)
    return solver.solve()

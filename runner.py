import argparse
import json
import sys

import networkx as nx
import numpy as np

from hamiltonian_graph import Graph, InvalidConfigurationError
from search_result import SearchResult
from solver import Solver

ALGORITHMS = {
    "exhaustive": "Starting exhaustive search",
    "greedy-tabu": "Running Tabu-Greedy Search",
    "random-tabu": "Running Tabu-Random Search",
}


def str2bool(v):
    if isinstance(v, bool):
        return v
    if v.lower() in ("yes", "true", "t", "y", "1"):
        return True
    if v.lower() in ("no", "false", "f", "n", "0"):
        return False
    raise argparse.ArgumentTypeError("Boolean value expected")


def read_graph_from_file(filename):
    edges = []
    n = 0
    with open(filename, "r", encoding="utf-8") as f:
        for line in f:
            if line.startswith("p"):
                _, _, nodes, _ = line.split()
                n = int(nodes)
            elif line.startswith("e"):
                _, u, v = line.split()
                edges.append((int(u) - 1, int(v) - 1))
    graph = nx.Graph()
    graph.add_nodes_from(range(n))
    graph.add_edges_from(edges)
    return graph


def compile_result(result: SearchResult) -> str:
    lines = []
    if result.found:
        lines.append("A solution is found in this graph:")
        lines.append(", ".join(str(p) for p in result.solution))
        lines.append(f"Path length: {len(result.solution)}")
    else:
        lines.append("No solutions found in this graph")
    lines.append(result.message or "")
    lines.append(f"Elapsed time: {result.elapsed_ms:.3f} ms")
    return "\n".join(lines)


def run_search(solver: Solver, algorithm: str, tabu_iters: int) -> SearchResult:
    if algorithm == "exhaustive":
        return solver.ex_search()
    if algorithm == "greedy-tabu":
        return solver.greedy_tabu(tabu_iters)
    return solver.random_tabu(tabu_iters)


def elapsed_summary(results):
    elapsed_ms = np.array([r.elapsed_ms for r in results], dtype=np.float64)
    return {
        "elapsed_ms": elapsed_ms.tolist(),
        "mean_ms": float(elapsed_ms.mean()),
        "min_ms": float(elapsed_ms.min()),
        "max_ms": float(elapsed_ms.max()),
        "std_ms": float(elapsed_ms.std()),
    }


def build_parser():
    parser = argparse.ArgumentParser(description="Hamiltonian path search on random graphs (exhaustive / tabu)")
    parser.add_argument("graph", type=str, nargs="?", default=None, help="DIMACS graph file, random graph if omitted")
    parser.add_argument("-N", "--nodes", type=int, default=20, help="Number of nodes in the random graph")
    parser.add_argument("-E", "--max-edges", type=int, default=5, help="Max edges per node in the random graph")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for graph generation and search")

    parser.add_argument("-A", "--algorithm", choices=sorted(ALGORITHMS), default="exhaustive", help="Search algorithm")
    parser.add_argument("--tabu-iters", type=int, default=1000, help="Tabu search iterations")
    parser.add_argument("-R", "--runs", type=int, default=20, help="Number of repeated runs for timing")
    parser.add_argument("--tabu-match", choices=["substring", "exact"], default="substring", help="Tabu list lookup")

    parser.add_argument("--show-graph", type=str2bool, default=False, help="Print the adjacency listing")
    parser.add_argument("--render", type=str2bool, default=False, help="Draw the graph and the found path")
    parser.add_argument("-O", "--output", type=str, default=None, help="Output JSON file path")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.runs < 1:
        parser.error("--runs must be at least 1")

    try:
        if args.graph:
            graph = Graph.from_networkx(read_graph_from_file(args.graph))
        else:
            print("Generating graph...")
            graph = Graph(args.nodes, args.max_edges, seed=args.seed)
        solver = Solver(graph, seed=args.seed, tabu_match=args.tabu_match)
    except InvalidConfigurationError as exc:
        parser.error(str(exc))

    if args.show_graph:
        print(graph)
    sys.stdout.flush()

    results = []
    for i in range(args.runs):
        print(f"{ALGORITHMS[args.algorithm]} #{i + 1}...")
        try:
            result = run_search(solver, args.algorithm, args.tabu_iters)
        except InvalidConfigurationError as exc:
            parser.error(str(exc))
        results.append(result)
        print(f"Search completed. Results return:\n{compile_result(result)}")
        sys.stdout.flush()

    summary = elapsed_summary(results)
    print(
        "Search iteration ended\n"
        f"Average elapsed time: {summary['mean_ms']:.3f} ms\n"
        f"Minimum elapsed time: {summary['min_ms']:.3f} ms\n"
        f"Maximum elapsed time: {summary['max_ms']:.3f} ms"
    )
    sys.stdout.flush()

    best = max(results, key=lambda r: len(r.solution))
    is_hamiltonian = graph.is_hamiltonian_path(best.solution)
    print(f"Longest path found: {len(best.solution)} / {graph.size} nodes, Hamiltonian: {is_hamiltonian}")
    sys.stdout.flush()

    if args.render:
        import matplotlib.pyplot as plt

        nx_graph = graph.to_networkx()
        plt.figure(figsize=(10, 8))
        pos = nx.spring_layout(nx_graph, seed=args.seed if args.seed is not None else 42)
        path_edges = list(zip(best.solution, best.solution[1:]))
        other_edges = [
            (u, v) for (u, v) in nx_graph.edges()
            if (u, v) not in path_edges and (v, u) not in path_edges
        ]

        nx.draw_networkx_nodes(nx_graph, pos, node_color="skyblue")
        nx.draw_networkx_nodes(nx_graph, pos, nodelist=best.solution[:1], node_color="lightgreen")
        nx.draw_networkx_labels(nx_graph, pos, labels={node: node for node in nx_graph.nodes()})
        nx.draw_networkx_edges(nx_graph, pos, edgelist=other_edges)
        nx.draw_networkx_edges(nx_graph, pos, edgelist=path_edges, edge_color="red", width=2)

        plt.title(f"Path length: {len(best.solution)} / {graph.size}")
        plt.show()

    if args.output:
        output = {
            "algorithm": args.algorithm,
            "nodes": graph.size,
            "edges": graph.edge_count,
            "solution": best.solution,
            "message": best.message,
            "is_hamiltonian_path": is_hamiltonian,
            **summary,
        }
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2)
        print(f"Results saved to: {args.output}")
        sys.stdout.flush()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

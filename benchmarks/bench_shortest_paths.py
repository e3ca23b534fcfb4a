"""Benchmark shortest path queries and spanning tree extraction."""

import time
from typing import Dict

from pathgraph import ShortestPathAlgorithm, random_graph


def benchmark_average_vs_repeated(
    size: int,
    density: float = 0.5,
    seed: int = 0,
) -> Dict[str, float]:
    """Compare one average query against one length query per vertex.

    Args:
        size: Number of vertices.
        density: Edge probability.
        seed: RNG seed for the graph.

    Returns:
        Dictionary with timing results.
    """
    G = random_graph(size, density, 1.0, 10.0, seed=seed)
    spa = ShortestPathAlgorithm()

    start = time.perf_counter()
    average = spa.average_shortest_path(G, 0)
    single_pass = time.perf_counter() - start

    start = time.perf_counter()
    lengths = [spa.get_shortest_path_length(G, 0, v) for v in range(1, size)]
    repeated = time.perf_counter() - start

    reachable = [d for d in lengths if d >= 0]
    repeated_average = sum(reachable) / len(reachable) if reachable else -1.0

    return {
        "size": size,
        "average": average,
        "repeated_average": repeated_average,
        "single_pass_sec": single_pass,
        "repeated_sec": repeated,
        "speedup": repeated / single_pass if single_pass > 0 else float("inf"),
    }


def benchmark_prim(size: int, density: float = 0.5, seed: int = 0) -> Dict[str, float]:
    """Time Prim's algorithm on a random graph."""
    G = random_graph(size, density, 1.0, 10.0, seed=seed)

    start = time.perf_counter()
    _, length = G.prim_mst()
    elapsed = time.perf_counter() - start

    return {"size": size, "edges": G.num_edges(), "length": length, "total_time_sec": elapsed}


if __name__ == "__main__":
    print("Benchmarking shortest path queries...")

    for n in (50, 100, 200):
        results = benchmark_average_vs_repeated(n)
        print(f"Average shortest path ({n} vertices):")
        print(f"  Single pass: {results['single_pass_sec']*1e3:.2f} ms")
        print(f"  Repeated length queries: {results['repeated_sec']*1e3:.2f} ms")
        print(f"  Speedup: {results['speedup']:.1f}x")

    for n in (50, 100, 200):
        results = benchmark_prim(n)
        print(f"Prim MST ({n} vertices, {results['edges']} edges): "
              f"{results['total_time_sec']*1e3:.2f} ms, length {results['length']:.3f}")

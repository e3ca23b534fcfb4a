"""
Utility functions for graphs.

Provides the seeded RNG helper used by the generators and a dense numpy view
of a graph's weights.
"""

from typing import Optional

import numpy as np

from .core import Graph


def rng_default(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy RNG; deterministic when ``seed`` is given."""
    return np.random.default_rng(seed)


def adjacency_matrix(graph: Graph, missing: float = 0.0) -> np.ndarray:
    """
    Dense weight matrix of a graph.

    ``W[u, v]`` is the weight stored on edge u -> v. Pairs without an edge
    hold ``missing``; pass ``np.inf`` to get a distance matrix suitable for
    shortest path references.

    Args:
        graph: Graph instance.
        missing: Fill value for non-adjacent pairs.

    Returns:
        (n, n) float64 array in vertex id order.

    Example:
        >>> G = Graph(2)
        >>> G.add_edge(0, 1, 4.0)
        >>> adjacency_matrix(G)
        array([[0., 4.],
               [4., 0.]])
    """
    n = graph.num_vertices()
    W = np.full((n, n), missing, dtype=np.float64)
    for u in graph.nodes():
        for edge in graph.get_node_edges(u):
            W[u, edge.end] = edge.weight
    return W

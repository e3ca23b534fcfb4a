"""
Minimum spanning tree: lazy Prim.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

import math
from typing import Set, Tuple

from .core import Edge, Graph
from .logging import get_logger
from .priority_queue import PriorityQueue

logger = get_logger(__name__)


def prim_mst(graph: Graph) -> Tuple[Graph, float]:
    """
    Prim's algorithm for minimum spanning tree, grown from vertex 0.

    Every edge leaving the tree is pushed onto a priority queue keyed by
    weight. The cheapest one is popped; if it leads back into the tree it is
    discarded, otherwise it is committed and the new vertex's edges are
    pushed. Growth stops when the tree spans the graph or the queue runs dry.

    Args:
        graph: Undirected Graph.

    Returns:
        Tuple of:
        - tree: Graph with the same vertex count holding the MST edges
        - length: total weight of the tree
        If the graph is disconnected, ``(Graph(0), math.inf)`` is returned
        instead. An empty graph gives ``(Graph(0), 0.0)``.

    Complexity: O(E log E) heap operations.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 1.0)
        >>> G.add_edge(1, 2, 2.0)
        >>> G.add_edge(0, 2, 3.0)
        >>> tree, length = prim_mst(G)
        >>> tree.num_edges(), length
        (2, 3.0)
    """
    n = graph.num_vertices()
    tree = Graph(n)
    length = 0.0
    if n == 0:
        return tree, length

    in_tree: Set[int] = {0}
    pq: PriorityQueue[Edge, float] = PriorityQueue()
    for edge in graph.get_node_edges(0):
        pq.insert(edge, edge.weight)

    while len(in_tree) < n and not pq.empty():
        edge, weight = pq.pop()
        if edge.end in in_tree:
            continue

        tree.add_edge(edge.start, edge.end, weight)
        length += weight
        in_tree.add(edge.end)
        for next_edge in graph.get_node_edges(edge.end):
            if next_edge.end not in in_tree:
                pq.insert(next_edge, next_edge.weight)

    if len(in_tree) < n:
        logger.info(
            "Graph is disconnected: spanning tree reached %d of %d vertices", len(in_tree), n
        )
        return Graph(0), math.inf

    logger.debug("Spanning tree over %d vertices, length %.6g", n, length)
    return tree, length

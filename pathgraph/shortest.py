"""
Single-source shortest path queries (Dijkstra).

``ShortestPathAlgorithm`` answers three kinds of query from a source vertex u:
the shortest route to v, the shortest distance to v, and the mean shortest
distance to every vertex reachable from u. Each query runs its own expansion
so the distance-only forms avoid carrying ``Path`` objects around.

All queries share one shape: u is finalized, its neighbours seed the frontier
at their edge weights, and the cheapest frontier entry is popped repeatedly.
A popped vertex that is already finalized is a stale duplicate and is
skipped; otherwise it is finalized and its unfinalized neighbours are relaxed
with ``PriorityQueue.insert_if_priority_less``.

Edge weights must be non-negative. Unreachable targets are reported with the
``NO_PATH`` sentinel (or an unchanged single-vertex ``Path``), never raised.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import Set

from .core import Graph
from .logging import get_logger
from .path import Path
from .priority_queue import PriorityQueue

logger = get_logger(__name__)

# Returned by the length queries when no other vertex can be reached.
NO_PATH = -1.0


class ShortestPathAlgorithm:
    """
    Dijkstra search engine over a ``Graph``.

    Instances hold no state between queries; every query builds its own
    frontier and finalized set, so one instance may be reused freely.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 1.0)
        >>> G.add_edge(1, 2, 2.0)
        >>> G.add_edge(0, 2, 5.0)
        >>> ShortestPathAlgorithm().get_shortest_path_length(G, 0, 2)
        3.0
    """

    def get_shortest_path(self, graph: Graph, u: int, v: int) -> Path:
        """
        Shortest route from u to v.

        Args:
            graph: Graph with non-negative edge weights.
            u: Source vertex.
            v: Target vertex.

        Returns:
            The route as a ``Path``. If v is unreachable the single-vertex
            ``Path(u)`` is returned, which is also the answer for u == v;
            use ``get_shortest_path_length`` to tell the two apart.
        """
        current = Path(u)
        if u == v:
            return current

        finalized: Set[int] = {u}
        frontier: PriorityQueue[Path, float] = PriorityQueue()
        for edge in graph.get_node_edges(u):
            next_path = Path.extended(current, edge)
            frontier.insert(next_path, next_path.weight)

        while not frontier.empty():
            current, _ = frontier.pop()
            vertex = current.final_vertex

            if vertex == v:
                return current

            if vertex in finalized:
                continue
            finalized.add(vertex)

            for edge in graph.get_node_edges(vertex):
                if edge.end not in finalized:
                    next_path = Path.extended(current, edge)
                    frontier.insert_if_priority_less(next_path, next_path.weight)

        logger.debug("No path from %s to %s", u, v)
        return Path(u)

    def get_shortest_path_length(self, graph: Graph, u: int, v: int) -> float:
        """
        Length of the shortest route from u to v.

        Returns:
            The distance, 0.0 when u == v, or ``NO_PATH`` if v is unreachable
            or either id is out of range.
        """
        if u == v and 0 <= u < graph.num_vertices():
            return 0.0

        finalized: Set[int] = {u}
        frontier: PriorityQueue[int, float] = PriorityQueue()
        for edge in graph.get_node_edges(u):
            frontier.insert(edge.end, edge.weight)

        while not frontier.empty():
            vertex, priority = frontier.pop()

            # First time the target leaves the frontier its distance is final.
            if vertex == v:
                return priority

            if vertex in finalized:
                continue
            finalized.add(vertex)

            for edge in graph.get_node_edges(vertex):
                if edge.end not in finalized:
                    frontier.insert_if_priority_less(edge.end, priority + edge.weight)

        logger.debug("No path from %s to %s", u, v)
        return NO_PATH

    def average_shortest_path(self, graph: Graph, u: int) -> float:
        """
        Mean shortest distance from u to every other vertex reachable from u.

        Runs a single expansion to exhaustion, which is cheaper than calling
        ``get_shortest_path_length`` once per vertex.

        Returns:
            The average distance, or ``NO_PATH`` if no other vertex is
            reachable.
        """
        total = 0.0
        finalized: Set[int] = {u}
        frontier: PriorityQueue[int, float] = PriorityQueue()
        for edge in graph.get_node_edges(u):
            frontier.insert(edge.end, edge.weight)

        while not frontier.empty():
            vertex, priority = frontier.pop()
            if vertex in finalized:
                continue
            finalized.add(vertex)
            total += priority

            for edge in graph.get_node_edges(vertex):
                if edge.end not in finalized:
                    frontier.insert_if_priority_less(edge.end, priority + edge.weight)

        reached = len(finalized) - 1
        logger.debug("Average from %s: %d vertices reached, total %.6g", u, reached, total)
        if reached == 0:
            return NO_PATH
        return total / reached


def shortest_path(graph: Graph, u: int, v: int) -> Path:
    """Shortcut for ``ShortestPathAlgorithm().get_shortest_path``."""
    return ShortestPathAlgorithm().get_shortest_path(graph, u, v)


def shortest_path_length(graph: Graph, u: int, v: int) -> float:
    """Shortcut for ``ShortestPathAlgorithm().get_shortest_path_length``."""
    return ShortestPathAlgorithm().get_shortest_path_length(graph, u, v)


def average_shortest_path_length(graph: Graph, u: int) -> float:
    """Shortcut for ``ShortestPathAlgorithm().average_shortest_path``."""
    return ShortestPathAlgorithm().average_shortest_path(graph, u)

"""
Core graph data structure.

Provides an undirected weighted ``Graph`` over dense integer vertex ids
``0..n-1`` stored as a list of per-vertex adjacency lists. Every undirected
edge is stored twice, once per endpoint; self-loops are stored once.

Vertex ids are checked permissively: an out-of-range id makes a query return
False, an empty tuple or ``NO_EDGE``, and makes a mutation a no-op.
"""

import dataclasses
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .logging import get_logger

logger = get_logger(__name__)

# Returned by Graph.get_edge_value when the vertices are not adjacent.
NO_EDGE = -1.0


@dataclass(frozen=True)
class Edge:
    """Directed half of an undirected, weighted edge.

    Parameters
    ----------
    start:
        Vertex whose adjacency list holds this edge.
    end:
        Vertex the edge leads to.
    weight:
        Non-negative edge weight. Not validated here; the search algorithms
        assume it.
    """

    start: int
    end: int
    weight: float


EdgeLike = Union[Edge, Tuple[int, int, float]]


class Graph:
    """
    Undirected weighted graph with adjacency-list representation.

    Attributes:
        adj: List indexed by vertex id; ``adj[v]`` holds the edges leaving v
            in insertion order.

    Complexity:
        - adjacent / get_edge_value: O(deg(v1))
        - add_edge / delete_edge / set_edge_value: O(deg(v1) + deg(v2))
        - get_node_edges: O(deg(v))

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 1.0)
        >>> G.add_edge(1, 2, 2.0)
        >>> G.adjacent(1, 0), G.get_edge_value(2, 1)
        (True, 2.0)
    """

    def __init__(self, n: int = 0):
        """
        Create a graph of ``n`` isolated vertices.

        Args:
            n: Number of vertices.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}.")
        self.adj: List[List[Edge]] = [[] for _ in range(n)]
        self._num_edges = 0

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices()}, num_edges={self.num_edges()})"

    def _in_range(self, v: int) -> bool:
        return 0 <= v < len(self.adj)

    def num_vertices(self) -> int:
        return len(self.adj)

    def num_edges(self) -> int:
        """Number of undirected edges; a self-loop counts once."""
        return self._num_edges

    def nodes(self) -> range:
        return range(len(self.adj))

    def edges(self) -> List[Edge]:
        """
        Return every undirected edge once, as ``Edge(u, v, w)`` with ``u <= v``.

        Edges are ordered by their smaller endpoint, then by insertion order.
        """
        edges_list = []
        for edges in self.adj:
            for edge in edges:
                if edge.start <= edge.end:
                    edges_list.append(edge)
        return edges_list

    def copy(self) -> "Graph":
        copied = Graph(self.num_vertices())
        copied.adj = [list(edges) for edges in self.adj]
        copied._num_edges = self._num_edges
        return copied

    def adjacent(self, v1: int, v2: int) -> bool:
        """
        Check whether an edge leads from v1 to v2.

        Returns False rather than raising when either id is out of range.
        """
        if not (self._in_range(v1) and self._in_range(v2)):
            return False
        return any(edge.end == v2 for edge in self.adj[v1])

    def get_edge_value(self, v1: int, v2: int) -> float:
        """Return the weight of edge v1 -> v2, or ``NO_EDGE`` if there is none."""
        if self._in_range(v1) and self._in_range(v2):
            for edge in self.adj[v1]:
                if edge.end == v2:
                    return edge.weight
        return NO_EDGE

    def get_node_edges(self, v: int) -> Tuple[Edge, ...]:
        """Return the edges leaving v; empty for an out-of-range id."""
        if not self._in_range(v):
            return ()
        return tuple(self.adj[v])

    def add_edge(self, v1: int, v2: int, weight: float) -> None:
        """
        Add an undirected edge between v1 and v2.

        Does nothing if the vertices are already adjacent or either id is out
        of range. A self-loop is stored once.
        """
        if not (self._in_range(v1) and self._in_range(v2)):
            logger.debug("add_edge(%s, %s) ignored: vertex out of range", v1, v2)
            return
        if self.adjacent(v1, v2):
            return

        weight = float(weight)
        self.adj[v1].append(Edge(v1, v2, weight))
        if v1 != v2:
            self.adj[v2].append(Edge(v2, v1, weight))
        self._num_edges += 1

    def add_edges_from(self, edges: Iterable[EdgeLike]) -> None:
        """Call ``add_edge`` for each ``Edge`` or ``(u, v, weight)`` triple."""
        for edge in edges:
            if isinstance(edge, Edge):
                self.add_edge(edge.start, edge.end, edge.weight)
            else:
                u, v, weight = edge
                self.add_edge(u, v, weight)

    def delete_edge(self, v1: int, v2: int) -> None:
        """
        Remove the edge between v1 and v2 in both directions.

        Self-loops cannot be deleted; non-adjacent pairs are ignored.
        """
        if v1 == v2 or not self.adjacent(v1, v2):
            return

        self._remove_first(v1, v2)
        self._remove_first(v2, v1)
        self._num_edges -= 1

    def _remove_first(self, start: int, end: int) -> None:
        edges = self.adj[start]
        for i, edge in enumerate(edges):
            if edge.end == end:
                del edges[i]
                return

    def set_edge_value(self, v1: int, v2: int, weight: float) -> None:
        """
        Change the weight of the edge between v1 and v2.

        Both stored directions are updated so the graph stays symmetric.
        Does nothing if the vertices are not adjacent.
        """
        if not self.adjacent(v1, v2):
            return

        self._replace_weight(v1, v2, weight)
        if v1 != v2:
            self._replace_weight(v2, v1, weight)

    def _replace_weight(self, start: int, end: int, weight: float) -> None:
        edges = self.adj[start]
        for i, edge in enumerate(edges):
            if edge.end == end:
                edges[i] = dataclasses.replace(edge, weight=float(weight))
                return

    def add_directed_edge(self, v1: int, v2: int, weight: float) -> None:
        """
        Store the single direction v1 -> v2 without mirroring it.

        Meant for loaders that trust their input to list both directions of
        an undirected edge: there is no duplicate check. The edge count goes
        up only if v2 -> v1 is not already stored. Out-of-range ids are
        ignored, as in ``add_edge``.
        """
        if not (self._in_range(v1) and self._in_range(v2)):
            logger.debug("add_directed_edge(%s, %s) ignored: vertex out of range", v1, v2)
            return
        if not any(e.end == v1 for e in self.adj[v2]):
            self._num_edges += 1
        self.adj[v1].append(Edge(v1, v2, float(weight)))

    def prim_mst(self) -> Tuple["Graph", float]:
        """
        Minimum spanning tree rooted at vertex 0.

        See :func:`pathgraph.mst.prim_mst`.
        """
        from .mst import prim_mst

        return prim_mst(self)

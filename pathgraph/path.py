"""Routes through a graph, as produced by the path-returning shortest path query."""

from typing import Iterator, List, Tuple

from .core import Edge


class Path:
    """
    A sequence of vertices and the total weight of the edges between them.

    A new path holds only its start vertex and weighs 0.0; ``extended`` and
    ``add_vertex`` append one edge at a time. The edge's ``start`` is assumed
    to be the current final vertex and is not checked.

    IMPORTANT: equality and hashing look only at ``(final_vertex, len(path))``.
    Two different routes of the same length ending at the same vertex compare
    equal, and weights are ignored. This lets the search frontier recognise
    "already queued a path to this vertex"; do not use ``==`` to compare
    routes. Compare ``vertices`` for that.

    Because the hash follows the length, ``add_vertex`` changes it. Do not call
    ``add_vertex`` on a path held in a set or used as a dict key; use
    ``extended`` to build the longer path instead.

    Example:
        >>> p = Path(0)
        >>> p.add_vertex(Edge(0, 2, 1.5))
        >>> p.vertices, p.weight
        ((0, 2), 1.5)
    """

    __slots__ = ("_vertices", "_weight")

    def __init__(self, start: int):
        self._vertices: List[int] = [start]
        self._weight = 0.0

    @classmethod
    def extended(cls, path: "Path", edge: Edge) -> "Path":
        """Return a copy of ``path`` continued along ``edge``."""
        new_path = cls(path._vertices[0])
        new_path._vertices = path._vertices + [edge.end]
        new_path._weight = path._weight + edge.weight
        return new_path

    def add_vertex(self, edge: Edge) -> None:
        """Continue this path along ``edge`` in place. Changes ``hash(self)``."""
        self._vertices.append(edge.end)
        self._weight += edge.weight

    @property
    def vertices(self) -> Tuple[int, ...]:
        return tuple(self._vertices)

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def start_vertex(self) -> int:
        return self._vertices[0]

    @property
    def final_vertex(self) -> int:
        return self._vertices[-1]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self._vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return len(self) == len(other) and self.final_vertex == other.final_vertex

    def __hash__(self) -> int:
        return hash((self.final_vertex, len(self)))

    def __repr__(self) -> str:
        route = " -> ".join(str(v) for v in self._vertices)
        return f"Path({route}, weight={self._weight})"

"""Edge-list import/export for graphs.

Format (whitespace separated tokens, no comments)::

    N
    v1 v2 weight
    v1 v2 weight
    ...

The first token is the vertex count N. Every following triple is one directed
edge record. An undirected graph must list both directions; the exporter
writes every stored direction so that ``load_graph(save_graph(G))``
reproduces G's adjacency lists.

Parsing is forgiving: a missing or malformed count yields an empty graph, and
a malformed record ends parsing with the edges read so far. Both cases are
logged as warnings rather than raised.
"""

from __future__ import annotations

from typing import List

from .core import Graph
from .logging import get_logger

logger = get_logger(__name__)


def parse_graph_string(text: str, mirror: bool = False) -> Graph:
    """
    Parse an edge list into a Graph.

    Parameters
    ----------
    text : str
        Edge-list source.
    mirror : bool
        If False (default), each record is appended as-is to the adjacency
        list of its first vertex, trusting the input to be symmetric. If True,
        records go through ``Graph.add_edge``, which stores both directions
        and ignores duplicates.

    Returns
    -------
    Graph
        Parsed graph; possibly empty or partially populated on bad input.
    """
    tokens = text.split()
    if not tokens:
        logger.warning("Edge list is empty; returning an empty graph.")
        return Graph(0)

    try:
        n = int(tokens[0])
    except ValueError:
        logger.warning("Invalid vertex count %r; returning an empty graph.", tokens[0])
        return Graph(0)
    if n < 0:
        logger.warning("Negative vertex count %d; returning an empty graph.", n)
        return Graph(0)

    G = Graph(n)
    records = tokens[1:]
    for offset in range(0, len(records), 3):
        record = records[offset : offset + 3]
        if len(record) < 3:
            logger.warning("Incomplete edge record %r at end of input; ignored.", " ".join(record))
            break
        try:
            v1, v2, weight = int(record[0]), int(record[1]), float(record[2])
        except ValueError:
            logger.warning("Malformed edge record %r; stopping.", " ".join(record))
            break

        if not (0 <= v1 < n and 0 <= v2 < n):
            logger.warning("Edge (%d, %d) out of range for %d vertices; skipped.", v1, v2, n)
            continue

        if mirror:
            G.add_edge(v1, v2, weight)
        else:
            G.add_directed_edge(v1, v2, weight)

    logger.debug("Parsed %r", G)
    return G


def load_graph(path: str, mirror: bool = False) -> Graph:
    """
    Load a graph from an edge-list file.

    Parameters
    ----------
    path : str
        Path to the file.
    mirror : bool
        See :func:`parse_graph_string`.

    Returns
    -------
    Graph
        Loaded graph.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_graph_string(text, mirror=mirror)


def graph_to_string(graph: Graph) -> str:
    """Serialize a graph to the edge-list format, one stored edge per line."""
    lines: List[str] = [str(graph.num_vertices())]
    for v in graph.nodes():
        for edge in graph.get_node_edges(v):
            lines.append(f"{edge.start} {edge.end} {float(edge.weight)!r}")
    return "\n".join(lines) + "\n"


def save_graph(graph: Graph, path: str) -> None:
    """Write a graph to ``path`` in the edge-list format."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(graph_to_string(graph))

"""
pathgraph - undirected weighted graphs with shortest paths and spanning trees.

This package provides:
- Graph data structure over dense integer vertex ids (Graph, Edge)
- Generic binary min-heap priority queue (PriorityQueue)
- Shortest path queries: route, length, average length (ShortestPathAlgorithm)
- Minimum spanning tree (prim_mst, Graph.prim_mst)
- Random graph generation and edge-list file I/O

Failures such as unknown vertices or unreachable targets are reported through
return values (NO_EDGE, NO_PATH, an infinite MST length), not exceptions.
"""

__version__ = "0.1.0"

from .core import NO_EDGE, Edge, Graph
from .generators import RandomGraphConfig, generate_random_graph, random_graph
from .io import graph_to_string, load_graph, parse_graph_string, save_graph
from .logging import configure_logging, get_logger, set_log_level
from .mst import prim_mst
from .path import Path
from .priority_queue import PriorityQueue, PriorityQueueElement
from .shortest import (
    NO_PATH,
    ShortestPathAlgorithm,
    average_shortest_path_length,
    shortest_path,
    shortest_path_length,
)
from .utils import adjacency_matrix, rng_default

__all__ = [
    "__version__",
    "Edge",
    "Graph",
    "NO_EDGE",
    "NO_PATH",
    "Path",
    "PriorityQueue",
    "PriorityQueueElement",
    "ShortestPathAlgorithm",
    "shortest_path",
    "shortest_path_length",
    "average_shortest_path_length",
    "prim_mst",
    "RandomGraphConfig",
    "generate_random_graph",
    "random_graph",
    "parse_graph_string",
    "load_graph",
    "graph_to_string",
    "save_graph",
    "adjacency_matrix",
    "rng_default",
    "get_logger",
    "set_log_level",
    "configure_logging",
]

# Example usage:
# from pathgraph import random_graph, ShortestPathAlgorithm
#
# G = random_graph(50, 0.5, 1.0, 10.0, seed=0)
# tree, length = G.prim_mst()
# average = ShortestPathAlgorithm().average_shortest_path(G, 0)

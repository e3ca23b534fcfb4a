"""
Example: spanning tree and shortest paths on a random graph

Builds a random graph, extracts its minimum spanning tree with Prim's
algorithm and computes the average shortest path length from one vertex.
"""

import argparse

from pathgraph import ShortestPathAlgorithm, configure_logging, random_graph


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--size", type=int, default=50, help="number of vertices")
    parser.add_argument("--density", type=float, default=0.5, help="edge probability")
    parser.add_argument("--distance-min", type=float, default=1.0)
    parser.add_argument("--distance-max", type=float, default=10.0)
    parser.add_argument("--source", type=int, default=0, help="vertex to average from")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    configure_logging(level=args.log_level)

    G = random_graph(
        args.size, args.density, args.distance_min, args.distance_max, seed=args.seed
    )
    print(f"Graph: {G.num_vertices()} vertices, {G.num_edges()} edges")

    tree, length = G.prim_mst()
    if tree.num_vertices() == 0 and G.num_vertices() > 0:
        print("Minimum spanning tree: graph is disconnected")
    else:
        print(f"Minimum spanning tree: {tree.num_edges()} edges, length {length:.4f}")

    average = ShortestPathAlgorithm().average_shortest_path(G, args.source)
    if average < 0:
        print(f"Average shortest path from {args.source}: no other vertex reachable")
    else:
        print(f"Average shortest path from {args.source}: {average:.4f}")


if __name__ == "__main__":
    main()

"""Performance benchmarks for pathgraph.

Microbenchmarks for the shortest path queries and Prim's algorithm.
"""

"""Contest algorithms: NTT, big integers, range sums, hull trick, strings and graphs."""

__version__ = "0.1.0"

__all__ = [
    "bigint",
    "convex_hull",
    "dijkstra",
    "graph",
    "lca",
    "mst",
    "ntt",
    "prefix_sums",
    "scc",
    "sequences",
    "strings",
    "traversal",
    "triangles",
]
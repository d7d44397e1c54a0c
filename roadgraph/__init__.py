"""Top-level package for roadgraph.

The core is a generic adjacency-set graph with a Dijkstra solver whose
edge weights are computed on demand by a caller-supplied function.
Around it sit loaders for road-network data, a routing service and
KML / HTML map exporters.
"""

from .graph import Graph, GraphType, path_weight, shortest_path, shortest_paths

__all__ = [
    "Graph",
    "GraphType",
    "shortest_path",
    "shortest_paths",
    "path_weight",
]

__version__ = "0.1.0"

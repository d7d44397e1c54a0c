"""Graph container and path-finding algorithms.

This subpackage holds the generic adjacency-set graph, the Dijkstra
engine that runs on top of it and the geodesic helpers used to weight
road networks.
"""

from .dijkstra import path_weight, shortest_path, shortest_paths
from .store import Graph, GraphType

__all__ = [
    "Graph",
    "GraphType",
    "shortest_path",
    "shortest_paths",
    "path_weight",
]

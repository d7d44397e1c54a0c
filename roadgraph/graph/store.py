"""Generic graph container.

The graph only stores topology: every node maps to the set of nodes
reachable from it through one edge. Edge weights are never stored, they
are computed on demand by the weight function handed to each query.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import (
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Set,
    Tuple,
    TypeVar,
)

N = TypeVar("N", bound=Hashable)

NodePath = List[N]
WeightFunction = Callable[[N, N], float]


class GraphType(Enum):
    """Edge semantics, fixed when the graph is created."""

    DIRECTED = auto()
    UNDIRECTED = auto()


class Graph(Generic[N]):
    """Adjacency-set graph over hashable, mutually orderable nodes.

    Undirected graphs store every edge in both adjacency sets, so
    ``size()`` counts each logical edge twice.

    Nodes must support ``<`` as well as hashing: neighbours, heap ties
    and ``shortest_paths`` results are ordered by node. Hashable nodes
    that cannot be compared raise ``TypeError`` once a query or
    ``nodes()`` has to order them.

    Example:
        graph: Graph[int] = Graph(GraphType.UNDIRECTED)
        graph.add_edge(1, 2)
        graph.shortest_path(1, 2, lambda x, y: abs(x - y))
    """

    def __init__(self, graph_type: GraphType = GraphType.DIRECTED) -> None:
        self._graph_type = graph_type
        self._adjacency: Dict[N, Set[N]] = {}

    @property
    def graph_type(self) -> GraphType:
        return self._graph_type

    @property
    def directed(self) -> bool:
        return self._graph_type is GraphType.DIRECTED

    # --- Mutation ------------------------------------------------------------

    def add_node(self, node: N) -> None:
        """Ensure ``node`` exists in the graph."""
        self._adjacency.setdefault(node, set())

    def add_edge(self, tile: N, head: N) -> None:
        """Link ``tile -> head``, adding both nodes if needed.

        On undirected graphs ``head -> tile`` is linked as well.
        Repeated calls with the same pair have no further effect.
        """
        head_neighbours = self._adjacency.setdefault(head, set())
        tile_neighbours = self._adjacency.setdefault(tile, set())

        tile_neighbours.add(head)
        if self._graph_type is GraphType.UNDIRECTED:
            head_neighbours.add(tile)

    # --- Structural queries --------------------------------------------------

    def order(self) -> int:
        """Number of nodes."""
        return len(self._adjacency)

    def size(self) -> int:
        """Number of stored edges (undirected edges count twice)."""
        return sum(len(neighbours) for neighbours in self._adjacency.values())

    def node_degree(self, node: N) -> int:
        """Number of edges leaving ``node``, 0 if the node is unknown."""
        return len(self._adjacency.get(node, ()))

    def adjacent(self, x: N, y: N) -> bool:
        """True if the edge ``x -> y`` exists."""
        neighbours = self._adjacency.get(x)
        return neighbours is not None and y in neighbours

    def neighbours(self, node: N) -> Tuple[N, ...]:
        """Neighbours of ``node`` in ascending order (empty if unknown)."""
        return tuple(sorted(self._adjacency.get(node, ())))

    def nodes(self) -> List[N]:
        """All nodes in ascending order."""
        return sorted(self._adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return self.order()

    def __iter__(self) -> Iterator[N]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        return (
            f"Graph(type={self._graph_type.name}, "
            f"order={self.order()}, size={self.size()})"
        )

    # --- Shortest paths ------------------------------------------------------

    def shortest_path(self, source: N, target: N, weight: WeightFunction) -> NodePath:
        """Shortest path from ``source`` to ``target``.

        See :func:`roadgraph.graph.dijkstra.shortest_path`.
        """
        from .dijkstra import shortest_path

        return shortest_path(self, source, target, weight)

    def shortest_paths(self, source: N, weight: WeightFunction) -> List[NodePath]:
        """Shortest paths from ``source`` to every reachable node.

        See :func:`roadgraph.graph.dijkstra.shortest_paths`.
        """
        from .dijkstra import shortest_paths

        return shortest_paths(self, source, weight)

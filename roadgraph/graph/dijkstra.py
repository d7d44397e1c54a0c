"""Shortest-path computation using Dijkstra's algorithm.

Both query forms share one relaxation loop. Edge weights are never read
from the graph: the caller supplies a ``weight(x, y)`` function that is
evaluated every time the edge ``x -> y`` is traversed. Weights must be
non-negative.

Ties are resolved deterministically: neighbours are visited in ascending
node order, the heap pops equal weights in ascending node order, and a
node's record is only replaced by a strictly cheaper path.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, Sequence, Tuple

from .store import N, NodePath, WeightFunction

if TYPE_CHECKING:
    from .store import Graph


@dataclass
class _WeightRecord(Generic[N]):
    """Best known way of reaching a node during one query."""

    weight: Any = 0
    infinite: bool = True
    previous: Optional[N] = None

    def reach(self, weight: Any, previous: N) -> None:
        self.weight = weight
        self.infinite = False
        self.previous = previous


def _run(
    graph: Graph[N],
    source: N,
    weight: WeightFunction,
    target: Optional[N] = None,
) -> Tuple[Dict[N, _WeightRecord[N]], bool]:
    """Relax edges from ``source`` until the heap drains or ``target`` pops.

    Returns the per-node records and whether ``target`` was reached.
    """
    records: Dict[N, _WeightRecord[N]] = {source: _WeightRecord(0, False, None)}
    heap: List[Tuple[Any, N]] = [(0, source)]

    while heap:
        current_weight, node = heapq.heappop(heap)
        record = records[node]

        # Outdated entry, a cheaper one was already processed
        if current_weight > record.weight:
            continue

        if target is not None and node == target:
            return records, True

        for adjacent in graph.neighbours(node):
            total = record.weight + weight(node, adjacent)
            adjacent_record = records.setdefault(adjacent, _WeightRecord())

            if adjacent_record.infinite or total < adjacent_record.weight:
                adjacent_record.reach(total, node)
                heapq.heappush(heap, (total, adjacent))

    return records, False


def _build_path(records: Dict[N, _WeightRecord[N]], node: N) -> NodePath:
    path: NodePath = []
    current: Optional[N] = node
    while current is not None:
        path.append(current)
        current = records[current].previous
    path.reverse()
    return path


def shortest_path(
    graph: Graph[N], source: N, target: N, weight: WeightFunction
) -> NodePath:
    """Compute the shortest path between two nodes.

    Parameters
    ----------
    graph:
        Graph to search.
    source:
        Departure node.
    target:
        Arrival node.
    weight:
        Function returning the cost of traversing the edge ``(x, y)``.

    Returns
    -------
    list
        Nodes from ``source`` to ``target`` (inclusive). ``[source]`` when
        both are the same node. Empty when either node is missing from
        the graph or ``target`` cannot be reached.
    """
    if source not in graph or target not in graph:
        return []

    records, found = _run(graph, source, weight, target)
    if not found:
        return []
    return _build_path(records, target)


def shortest_paths(
    graph: Graph[N], source: N, weight: WeightFunction
) -> List[NodePath]:
    """Compute the shortest paths from ``source`` to every reachable node.

    Parameters
    ----------
    graph:
        Graph to search.
    source:
        Departure node.
    weight:
        Function returning the cost of traversing the edge ``(x, y)``.

    Returns
    -------
    list[list]
        One path per reachable node, ordered by destination node. The
        source itself is included as the one-node path ``[source]``.
        Empty when ``source`` is missing from the graph.
    """
    if source not in graph:
        return []

    records, _ = _run(graph, source, weight)
    return [
        _build_path(records, node)
        for node in sorted(records)
        if not records[node].infinite
    ]


def path_weight(path: Sequence[N], weight: WeightFunction) -> Any:
    """Total weight of ``path`` under ``weight`` (0 for fewer than two nodes)."""
    return sum(weight(x, y) for x, y in zip(path, path[1:]))

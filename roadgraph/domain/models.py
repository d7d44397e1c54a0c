"""Immutable domain models for the road-network tooling.

All models are frozen dataclasses with slots. They tie the generic graph
core to the geographic data loaded around it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple

from ..graph.geodesy import GeoNode
from ..graph.store import Graph


@dataclass(frozen=True, slots=True)
class RoadNetwork:
    """A loaded road network.

    Attributes:
        graph: Topology of the network
        weight: Edge weight function used for routing queries
        locations: Coordinates for nodes that are not GeoNodes themselves
        streets: Street name -> ordered street geometry, if known
    """

    graph: Graph[Any]
    weight: Callable[[Any, Any], float]
    locations: Mapping[Any, GeoNode] = field(default_factory=dict)
    streets: Mapping[str, Tuple[GeoNode, ...]] = field(default_factory=dict)

    def locate(self, node: Any) -> Optional[GeoNode]:
        """Return the coordinates of ``node``, or None if unknown."""
        if isinstance(node, GeoNode):
            return node
        return self.locations.get(node)

    def street_anchor(self, name: str) -> Optional[GeoNode]:
        """First vertex of street ``name``, or None if unknown."""
        geometry = self.streets.get(name)
        if not geometry:
            return None
        return geometry[0]


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route computation.

    Attributes:
        path: Ordered tuple of nodes forming the route
        total_weight: Sum of the edge weights along the route
    """

    path: Tuple[Any, ...]
    total_weight: float = 0.0

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes in the route."""
        return len(self.path)

    @property
    def source(self) -> Any:
        return self.path[0] if self.path else None

    @property
    def destination(self) -> Any:
        return self.path[-1] if self.path else None


@dataclass(frozen=True, slots=True)
class Placemark:
    """A named line string ready to be exported.

    Attributes:
        name: Display name of the placemark
        coordinates: Ordered vertices of the line string
    """

    name: str
    coordinates: Tuple[GeoNode, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return len(self.coordinates) == 0

"""Roadmap service - Routing orchestrator.

This service ties a network repository, the shortest-path engine and an
exporter together:

1. Load the network (cached by the repository)
2. Compute one route or every route from a source node
3. Convert routes to placemarks and export them
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence

from ..domain.errors import NoRouteFoundError, StreetNotFoundError
from ..domain.models import Placemark, RoadNetwork, RouteResult
from ..graph.dijkstra import path_weight, shortest_path, shortest_paths
from ..graph.geodesy import GeoNode
from ..ports.export import PathExporterPort
from ..ports.network import NetworkRepositoryPort

_ORIGIN = GeoNode(0.0, 0.0)


@dataclass
class RoadmapService:
    """Main service for computing and exporting road routes.

    Attributes:
        repository: Loads the road network
        exporter: Writes routes to disk (KML by default)
        map_renderer: Optional secondary exporter (HTML map)
    """

    repository: NetworkRepositoryPort
    exporter: PathExporterPort
    map_renderer: Optional[PathExporterPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def network(self) -> RoadNetwork:
        return self.repository.load()

    def all_routes(
        self, source: Any, max_paths: Optional[int] = None
    ) -> List[RouteResult]:
        """Shortest routes from ``source`` to every reachable node.

        Args:
            source: Departure node.
            max_paths: Keep at most this many routes (None keeps all).

        Returns:
            Routes ordered by destination node, starting with the
            one-node route to ``source`` itself. Empty if ``source`` is
            not part of the network.

        Raises:
            ValueError: If ``max_paths`` is negative.
        """
        if max_paths is not None and max_paths < 0:
            raise ValueError(f"max_paths must be 0 or greater, got {max_paths}")

        network = self.network
        paths = shortest_paths(network.graph, source, network.weight)
        if max_paths is not None:
            paths = paths[:max_paths]

        self._logger.info(
            "Routes computed",
            extra={"source": str(source), "routes": len(paths)},
        )
        return [self._route(network, path) for path in paths]

    def route(self, departure: Any, arrival: Any) -> RouteResult:
        """Shortest route between two nodes.

        Raises:
            NoRouteFoundError: If either node is unknown or unreachable.
        """
        network = self.network
        path = shortest_path(network.graph, departure, arrival, network.weight)

        if not path:
            self._logger.warning(
                "No route found",
                extra={"departure": str(departure), "arrival": str(arrival)},
            )
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=str(departure),
                arrival=str(arrival),
            )

        result = self._route(network, path)
        self._logger.info(
            "Route found",
            extra={"stops": result.num_stops, "weight": result.total_weight},
        )
        return result

    def street_route(self, from_street: str, to_street: str) -> RouteResult:
        """Shortest route between the first vertices of two streets.

        Raises:
            StreetNotFoundError: If a street name is unknown.
            NoRouteFoundError: If the streets are not connected.
        """
        network = self.network
        departure = network.street_anchor(from_street)
        if departure is None:
            raise StreetNotFoundError(
                f"Street not found: {from_street}", street_name=from_street
            )
        arrival = network.street_anchor(to_street)
        if arrival is None:
            raise StreetNotFoundError(
                f"Street not found: {to_street}", street_name=to_street
            )

        try:
            return self.route(departure, arrival)
        except NoRouteFoundError as e:
            raise NoRouteFoundError(
                f"No path from {from_street} to {to_street}",
                departure=from_street,
                arrival=to_street,
                cause=e,
            )

    def has_street(self, name: str) -> bool:
        return name in self.network.streets

    def placemarks(self, routes: Sequence[RouteResult]) -> List[Placemark]:
        """Convert routes to ``Route N`` placemarks, numbered from 0."""
        network = self.network
        return [
            Placemark(
                name=f"Route {index}",
                coordinates=tuple(self._locate(network, node) for node in route.path),
            )
            for index, route in enumerate(routes)
        ]

    def export(
        self,
        routes: Sequence[RouteResult],
        output_path: Path,
        map_output_path: Optional[Path] = None,
    ) -> Path:
        """Export routes, and render them on a map when requested.

        Raises:
            ExportError: If writing either output fails.
        """
        placemarks = self.placemarks(routes)
        written = self.exporter.export(placemarks, Path(output_path))

        if map_output_path is not None and self.map_renderer is not None:
            self.map_renderer.export(placemarks, Path(map_output_path))

        return written

    def _route(self, network: RoadNetwork, path: List[Any]) -> RouteResult:
        return RouteResult(
            path=tuple(path),
            total_weight=path_weight(path, network.weight),
        )

    def _locate(self, network: RoadNetwork, node: Any) -> GeoNode:
        location = network.locate(node)
        if location is None:
            self._logger.warning(
                "Node has no coordinates", extra={"node": str(node)}
            )
            return _ORIGIN
        return location

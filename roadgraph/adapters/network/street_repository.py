"""Street-network CSV repository.

Each CSV row describes one street segment. The street name sits in a
configurable column (4 by default) and the geometry is a list of
``lon lat`` decimal pairs somewhere in the row, e.g. a WKT
``LINESTRING (9.98 53.55, 9.99 53.56)`` cell in EPSG:4326.

Consecutive vertices of a segment are linked in both directions on a
directed graph of GeoNodes. Segments that share a vertex coordinate are
therefore connected, which is what turns individual streets into a
routable network.
"""

from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ...config import GeodesyConfig, StreetsConfig, get_config
from ...domain.errors import ConfigurationError, NetworkLoadError
from ...domain.models import RoadNetwork
from ...graph.geodesy import GeoNode, geodesic_weight
from ...graph.store import Graph, GraphType

_COORDINATE_PAIR = re.compile(r"(-?\d+\.\d+) (-?\d+\.\d+)")


def parse_geometry(text: str) -> List[GeoNode]:
    """Extract every ``lon lat`` pair from ``text`` as GeoNodes."""
    return [
        GeoNode(float(lon), float(lat)) for lon, lat in _COORDINATE_PAIR.findall(text)
    ]


@dataclass
class StreetCsvRepository:
    """Road network built from street geometries stored in CSV files.

    This adapter implements NetworkRepositoryPort. The returned network
    is weighted by great-circle distance in metres.

    Attributes:
        config: Street files configuration
        geodesy: Distance settings (earth radius)
        paths: Optional override of the configured CSV files
    """

    config: StreetsConfig = field(default_factory=lambda: get_config().streets)
    geodesy: GeodesyConfig = field(default_factory=lambda: get_config().geodesy)
    paths: Optional[Sequence[Path]] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _network: Optional[RoadNetwork] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.paths is None:
            self.paths = self.config.paths

    def load(self) -> RoadNetwork:
        """Load every configured street file into one network.

        Returns:
            A network of GeoNodes with a street name -> geometry table.

        Raises:
            ConfigurationError: If no street file is configured.
            NetworkLoadError: If a file is missing or unreadable.
        """
        if self._network is not None:
            return self._network

        if not self.paths:
            raise ConfigurationError(
                "No street network files configured", setting_name="files"
            )

        graph: Graph[GeoNode] = Graph(GraphType.DIRECTED)
        streets: Dict[str, List[GeoNode]] = {}

        for path in self.paths:
            try:
                segments = self._load_file(Path(path), graph, streets)
            except (OSError, ValueError, csv.Error) as e:
                raise NetworkLoadError(
                    f"Failed to load street network: {e}",
                    file_path=str(path),
                    cause=e,
                )
            self._logger.debug(
                "Street file loaded",
                extra={"file": str(path), "segments": segments},
            )

        self._network = RoadNetwork(
            graph=graph,
            weight=geodesic_weight(self.geodesy.earth_radius_km),
            streets={name: tuple(nodes) for name, nodes in streets.items()},
        )
        self._logger.info(
            "Street network loaded",
            extra={"nodes": graph.order(), "streets": len(streets)},
        )
        return self._network

    def _load_file(
        self,
        path: Path,
        graph: Graph[GeoNode],
        streets: Dict[str, List[GeoNode]],
    ) -> int:
        """Add the segments of one CSV file, returning how many were read."""
        column = self.config.name_column
        segments = 0

        with path.open(newline="", encoding="utf-8") as f:
            for row in csv.reader(f):
                if len(row) <= column:
                    continue

                geometry = parse_geometry(",".join(row))
                if not geometry:
                    continue

                name = row[column].strip()
                streets.setdefault(name, []).extend(geometry)

                for previous, node in zip(geometry, geometry[1:]):
                    graph.add_edge(previous, node)
                    graph.add_edge(node, previous)
                if len(geometry) == 1:
                    graph.add_node(geometry[0])
                segments += 1

        return segments

    def clear_cache(self) -> None:
        """Clear the cached network."""
        self._network = None
        self._logger.debug("Street network cache cleared")

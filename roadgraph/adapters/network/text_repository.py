"""Whitespace-separated road network repository.

Reads the "roadmap" data format:

- the edges file holds ``id start end distance`` records,
- the nodes file holds ``id lon lat`` records.

Records are whitespace separated and may span lines. Reading stops at
the first record that does not parse, so trailing garbage is ignored.
Edges are undirected: each record links both endpoints and the
distance is registered for both directions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional, Sequence, Tuple

from ...config import RoadmapConfig, get_config
from ...domain.errors import NetworkLoadError
from ...domain.models import RoadNetwork
from ...graph.geodesy import GeoNode, edge_table_weight
from ...graph.store import Graph, GraphType


def _records(
    path: Path,
    converters: Sequence[Callable[[str], Any]],
    logger: logging.Logger,
) -> Iterator[Tuple[Any, ...]]:
    """Yield converted records until the first one that fails to parse."""
    with path.open(encoding="utf-8") as f:
        tokens = f.read().split()

    width = len(converters)
    for offset in range(0, len(tokens) - width + 1, width):
        chunk = tokens[offset : offset + width]
        try:
            yield tuple(convert(token) for convert, token in zip(converters, chunk))
        except ValueError:
            logger.warning(
                "Stopped reading at malformed record",
                extra={"file": str(path), "record": " ".join(chunk)},
            )
            return


@dataclass
class TextNetworkRepository:
    """Road network loaded from whitespace-separated text files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Roadmap configuration (data directory, file names)
        edges_path: Optional override of the configured edges file
        nodes_path: Optional override of the configured nodes file
    """

    config: RoadmapConfig = field(default_factory=lambda: get_config().roadmap)
    edges_path: Optional[Path] = None
    nodes_path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _network: Optional[RoadNetwork] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> RoadNetwork:
        """Load the road network from the edges and nodes files.

        Returns:
            An undirected integer network weighted by the edge distances.

        Raises:
            NetworkLoadError: If a file is missing or unreadable.
        """
        if self._network is not None:
            return self._network

        edges_path = Path(self.edges_path or self.config.edges_path)
        nodes_path = Path(self.nodes_path or self.config.nodes_path)

        self._logger.debug(
            "Loading road network",
            extra={
                "edges_path": str(edges_path),
                "nodes_path": str(nodes_path),
            },
        )

        graph: Graph[int] = Graph(GraphType.UNDIRECTED)
        distances: Dict[Tuple[int, int], float] = {}
        locations: Dict[int, GeoNode] = {}

        current = edges_path
        try:
            edge_fields = (int, int, int, float)
            for _, start, end, distance in _records(
                edges_path, edge_fields, self._logger
            ):
                distances.setdefault((start, end), distance)
                distances.setdefault((end, start), distance)
                graph.add_edge(start, end)

            current = nodes_path
            node_fields = (int, float, float)
            for node_id, lon, lat in _records(
                nodes_path, node_fields, self._logger
            ):
                locations.setdefault(node_id, GeoNode(lon, lat))
        except (OSError, ValueError) as e:
            raise NetworkLoadError(
                f"Failed to load road network: {e}",
                file_path=str(current),
                cause=e,
            )

        self._network = RoadNetwork(
            graph=graph,
            weight=edge_table_weight(distances),
            locations=locations,
        )
        self._logger.info(
            "Road network loaded",
            extra={
                "nodes": graph.order(),
                "edges": graph.size() // 2,
                "located": len(locations),
            },
        )
        return self._network

    def clear_cache(self) -> None:
        """Clear the cached network."""
        self._network = None
        self._logger.debug("Road network cache cleared")

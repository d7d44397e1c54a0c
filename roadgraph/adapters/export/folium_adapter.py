"""Folium map renderer adapter.

Draws exported routes on an interactive HTML map:
- one polyline per placemark,
- a green marker at each route start and a red one at each end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

from ...domain.errors import ExportError
from ...domain.models import Placemark


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements PathExporterPort using Folium for
    generating interactive HTML maps.
    """

    zoom_start: int = 12
    line_color: str = "red"
    line_weight: int = 3
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def export(
        self,
        placemarks: Sequence[Placemark],
        output_path: Path,
    ) -> Path:
        """Render routes on a map and save to file.

        Args:
            placemarks: Routes to draw.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.

        Raises:
            ExportError: If there is nothing to draw or rendering fails.
        """
        output_path = Path(output_path)
        routes = [p for p in placemarks if not p.is_empty]
        if not routes:
            raise ExportError(
                "Cannot render empty route",
                output_path=str(output_path),
                exporter_type="folium",
            )

        self._logger.info(
            "Rendering route map",
            extra={"routes": len(routes), "output_path": str(output_path)},
        )

        try:
            import folium

            points: List[Tuple[float, float]] = [
                (node.latitude, node.longitude)
                for route in routes
                for node in route.coordinates
            ]
            center_lat = sum(lat for lat, _ in points) / len(points)
            center_lon = sum(lon for _, lon in points) / len(points)

            m = folium.Map(
                location=[center_lat, center_lon], zoom_start=self.zoom_start
            )

            for route in routes:
                coords = [
                    [node.latitude, node.longitude] for node in route.coordinates
                ]
                folium.Marker(
                    location=coords[0],
                    tooltip=f"{route.name} start",
                    icon=folium.Icon(color="green"),
                ).add_to(m)
                if len(coords) >= 2:
                    folium.Marker(
                        location=coords[-1],
                        tooltip=f"{route.name} end",
                        icon=folium.Icon(color="red"),
                    ).add_to(m)
                    folium.PolyLine(
                        coords,
                        weight=self.line_weight,
                        color=self.line_color,
                        opacity=0.8,
                        tooltip=route.name,
                    ).add_to(m)

            if len(points) >= 2:
                m.fit_bounds(points)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))

            self._logger.info(
                "Map rendered successfully",
                extra={"output_path": str(output_path)},
            )

            return output_path

        except ImportError as e:
            raise ExportError(
                "Folium not installed",
                output_path=str(output_path),
                exporter_type="folium",
                cause=e,
            )
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise ExportError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                exporter_type="folium",
                cause=e,
            )

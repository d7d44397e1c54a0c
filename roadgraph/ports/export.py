"""Export port - Abstraction for writing routes to files.

This protocol defines the contract for route export, allowing
different implementations (KML, Folium HTML maps) to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Placemark


class PathExporterPort(Protocol):
    """Port for route export.

    Implementations:
    - adapters/export/kml_exporter.py (KmlPathExporter)
    - adapters/export/folium_adapter.py (FoliumMapRenderer)
    """

    def export(
        self,
        placemarks: Sequence[Placemark],
        output_path: Path,
    ) -> Path:
        """Write placemarks to a file.

        Args:
            placemarks: Named line strings to export.
            output_path: Where to save the output.

        Returns:
            Path to the generated file.

        Raises:
            ExportError: If the file cannot be written.
        """
        ...

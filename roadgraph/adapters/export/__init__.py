"""Export adapters - Implementations of PathExporterPort.

Available implementations:
- KmlPathExporter: KML 2.2 line strings (Google Earth, QGIS)
- FoliumMapRenderer: Folium-based interactive HTML map
"""

from .folium_adapter import FoliumMapRenderer
from .kml_exporter import KmlPathExporter

__all__ = ["KmlPathExporter", "FoliumMapRenderer"]

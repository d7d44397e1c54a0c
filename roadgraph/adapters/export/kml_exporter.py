"""KML route exporter.

Writes every placemark as a red ``LineString`` inside a single
``Paths`` document. Coordinates are ``lon,lat,0`` triples, one per line.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from ...domain.errors import ExportError
from ...domain.models import Placemark

KML_NAMESPACE = "http://www.opengis.net/kml/2.2"
STYLE_ID = "redPoly"


def build_document(
    placemarks: Sequence[Placemark],
    document_name: str = "Paths",
    line_color: str = "ff0000ff",
    line_width: float = 0.5,
) -> ET.ElementTree:
    """Build the KML element tree for ``placemarks``."""
    ET.register_namespace("", KML_NAMESPACE)

    def tag(name: str) -> str:
        return f"{{{KML_NAMESPACE}}}{name}"

    kml = ET.Element(tag("kml"))
    document = ET.SubElement(kml, tag("Document"))
    ET.SubElement(document, tag("name")).text = document_name

    style = ET.SubElement(document, tag("Style"), id=STYLE_ID)
    line_style = ET.SubElement(style, tag("LineStyle"))
    ET.SubElement(line_style, tag("color")).text = line_color
    ET.SubElement(line_style, tag("width")).text = f"{line_width:g}"

    for placemark in placemarks:
        element = ET.SubElement(document, tag("Placemark"))
        ET.SubElement(element, tag("name")).text = placemark.name
        ET.SubElement(element, tag("styleUrl")).text = f"#{STYLE_ID}"
        line = ET.SubElement(element, tag("LineString"))
        coordinates = ET.SubElement(line, tag("coordinates"))
        coordinates.text = "".join(
            f"\n{node.to_kml()},0" for node in placemark.coordinates
        ) + "\n"

    tree = ET.ElementTree(kml)
    ET.indent(tree, space="  ")
    return tree


@dataclass
class KmlPathExporter:
    """KML exporter.

    This adapter implements PathExporterPort. Each export writes a
    complete document; an empty placemark list yields a valid, empty
    ``Paths`` document.
    """

    document_name: str = "Paths"
    line_color: str = "ff0000ff"
    line_width: float = 0.5
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def export(
        self,
        placemarks: Sequence[Placemark],
        output_path: Path,
    ) -> Path:
        """Write ``placemarks`` to ``output_path`` as KML.

        Args:
            placemarks: Named line strings to export.
            output_path: Destination ``.kml`` file.

        Returns:
            Path to the written file.

        Raises:
            ExportError: If the file cannot be written.
        """
        output_path = Path(output_path)
        self._logger.info(
            "Exporting KML",
            extra={"placemarks": len(placemarks), "output_path": str(output_path)},
        )

        tree = build_document(
            placemarks,
            document_name=self.document_name,
            line_color=self.line_color,
            line_width=self.line_width,
        )

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            tree.write(output_path, encoding="UTF-8", xml_declaration=True)
        except OSError as e:
            self._logger.error(
                "KML export failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise ExportError(
                f"Failed to write KML file: {e}",
                output_path=str(output_path),
                exporter_type="kml",
                cause=e,
            )

        return output_path

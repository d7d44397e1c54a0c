"""Typed domain errors for the road-network tooling.

The graph core never raises: missing nodes and unreachable targets come
back as empty results. These errors belong to the layers around it
(loaders, services, exporters), which turn empty results and I/O
failures into explicit, typed errors.

All errors inherit from RoadGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadGraphError(Exception):
    """Base error for the road-network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NetworkLoadError(RoadGraphError):
    """Road network could not be read or parsed.

    Attributes:
        file_path: Path to the offending data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class StreetNotFoundError(RoadGraphError):
    """Street name not present in the loaded network.

    Attributes:
        street_name: The name that was looked up
    """

    street_name: str = ""


@dataclass
class NoRouteFoundError(RoadGraphError):
    """No path exists between the requested endpoints.

    Attributes:
        departure: Departure node or street, as text
        arrival: Arrival node or street, as text
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class ConfigurationError(RoadGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class ExportError(RoadGraphError):
    """Writing routes to a KML file or map failed.

    Attributes:
        output_path: Path where the export was attempted
        exporter_type: Type of exporter that failed
    """

    output_path: Optional[str] = None
    exporter_type: str = ""

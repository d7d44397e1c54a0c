"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors used by
the loaders, services and exporters around the graph core.
"""

from .errors import (
    ConfigurationError,
    ExportError,
    NetworkLoadError,
    NoRouteFoundError,
    RoadGraphError,
    StreetNotFoundError,
)
from .models import Placemark, RoadNetwork, RouteResult

__all__ = [
    # Models
    "RoadNetwork",
    "RouteResult",
    "Placemark",
    # Errors
    "RoadGraphError",
    "NetworkLoadError",
    "StreetNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
    "ExportError",
]

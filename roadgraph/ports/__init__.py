"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the routing service and the
adapters that load networks and export routes.
"""

from .export import PathExporterPort
from .network import NetworkRepositoryPort

__all__ = [
    "NetworkRepositoryPort",
    "PathExporterPort",
]

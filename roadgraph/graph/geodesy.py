"""Geographic nodes and distance-based weight functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Mapping, Tuple, TypeVar

from geopy.distance import great_circle

EARTH_RADIUS_KM = 6371.0

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True, order=True, slots=True)
class GeoNode:
    """A road-network vertex in WGS84 degrees.

    Nodes order by longitude, then latitude.
    """

    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    def to_kml(self) -> str:
        """Render as a KML ``lon,lat`` coordinate pair."""
        lon = format_coordinate(self.longitude)
        lat = format_coordinate(self.latitude)
        return f"{lon},{lat}"


def format_coordinate(value: float) -> str:
    """Format with 15 significant digits, dropping trailing zeros."""
    return f"{value:.15g}"


def geodesic_distance(
    a: GeoNode, b: GeoNode, radius_km: float = EARTH_RADIUS_KM
) -> float:
    """Great-circle distance between two nodes, in metres."""
    return great_circle(
        (a.latitude, a.longitude), (b.latitude, b.longitude), radius=radius_km
    ).meters


def geodesic_weight(
    radius_km: float = EARTH_RADIUS_KM,
) -> Callable[[GeoNode, GeoNode], float]:
    """Weight function measuring edges in metres on a sphere of ``radius_km``."""

    def weight(a: GeoNode, b: GeoNode) -> float:
        return geodesic_distance(a, b, radius_km)

    return weight


def edge_table_weight(
    table: Mapping[Tuple[K, K], float], default: float = 0.0
) -> Callable[[K, K], float]:
    """Weight function backed by a ``{(x, y): weight}`` lookup table.

    Pairs missing from the table weigh ``default``.
    """

    def weight(x: K, y: K) -> float:
        return table.get((x, y), default)

    return weight

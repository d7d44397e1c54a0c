"""Network ports - Abstractions for loading road networks.

These protocols define the contract between the routing service and
the adapters that read network data from disk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import RoadNetwork


class NetworkRepositoryPort(Protocol):
    """Port for loading road-network data.

    Implementations:
    - adapters/network/text_repository.py (TextNetworkRepository)
    - adapters/network/street_repository.py (StreetCsvRepository)

    The repository is responsible for loading and caching the network
    graph together with its coordinates and weight function.
    """

    def load(self) -> RoadNetwork:
        """Load the road network.

        Returns:
            The network graph with its weight function and coordinates.

        Raises:
            NetworkLoadError: If the data cannot be read.
        """
        ...

    def clear_cache(self) -> None:
        """Forget any cached network so the next load re-reads the files."""
        ...

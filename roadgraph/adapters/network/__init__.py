"""Network adapters - Implementations of NetworkRepositoryPort.

Available implementations:
- TextNetworkRepository: Loads whitespace-separated edge and node files
- StreetCsvRepository: Loads street geometries from CSV files
"""

from .street_repository import StreetCsvRepository
from .text_repository import TextNetworkRepository

__all__ = ["TextNetworkRepository", "StreetCsvRepository"]

"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for data locations,
routing defaults and logging.

Configuration can be overridden via environment variables:
- ROADGRAPH_ROADMAP_DATA_DIR=/path/to/data
- ROADGRAPH_ROADMAP_SOURCE_NODE=1
- ROADGRAPH_STREETS_FILES='["a.csv", "b.csv"]'
- ROADGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class RoadmapConfig(BaseSettings):
    """Whitespace-separated road network (edges + node coordinates).

    Environment variables prefixed with ROADGRAPH_ROADMAP_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_ROADMAP_")

    data_dir: Path = Field(default_factory=lambda: _DEFAULT_DATA_DIR)
    edges_file: str = "edges.txt"
    nodes_file: str = "nodes_lon_lat.txt"
    output_file: str = "roadmap_output.kml"
    source_node: int = 1
    max_paths: Optional[int] = Field(default=None, ge=0)

    @property
    def edges_path(self) -> Path:
        """Full path to the edges file."""
        return self.data_dir / self.edges_file

    @property
    def nodes_path(self) -> Path:
        """Full path to the node coordinates file."""
        return self.data_dir / self.nodes_file

    @property
    def output_path(self) -> Path:
        """Full path to the KML output file."""
        return self.data_dir / self.output_file


class StreetsConfig(BaseSettings):
    """Street-network CSV files.

    Environment variables prefixed with ROADGRAPH_STREETS_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_STREETS_")

    data_dir: Path = Field(default_factory=lambda: _DEFAULT_DATA_DIR)
    files: List[str] = Field(default_factory=list)
    name_column: int = Field(default=4, ge=0)
    output_file: str = "streets_output.kml"
    map_file: Optional[str] = None

    @property
    def paths(self) -> List[Path]:
        """Full paths to the street CSV files."""
        return [self.data_dir / name for name in self.files]

    @property
    def output_path(self) -> Path:
        """Full path to the KML output file."""
        return self.data_dir / self.output_file


class GeodesyConfig(BaseSettings):
    """Distance computation settings.

    Environment variables prefixed with ROADGRAPH_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_GEO_")

    earth_radius_km: float = Field(default=6371.0, gt=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ROADGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.roadmap.edges_path)
        print(config.geodesy.earth_radius_km)

    Environment variables prefixed with ROADGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ROADGRAPH_")

    roadmap: RoadmapConfig = Field(default_factory=RoadmapConfig)
    streets: StreetsConfig = Field(default_factory=StreetsConfig)
    geodesy: GeodesyConfig = Field(default_factory=GeodesyConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured level and format to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(
        level=config.level.upper(),
        format=config.format,
        force=True,
    )

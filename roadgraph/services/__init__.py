"""Services layer - Application orchestration.

Available services:
- RoadmapService: Computes shortest routes and exports them
"""

from .roadmap import RoadmapService

__all__ = ["RoadmapService"]

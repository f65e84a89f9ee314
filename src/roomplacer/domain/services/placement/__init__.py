"""Furniture placement engine.

This package provides:
- Perspective scaling and shadow footprints
- Layered collision detection (rug, upright, wall)
- Randomized single-item position search
- Partition-based bulk layout with parking for failed items
- FurniturePlacementService facade tying them together
"""

from __future__ import annotations

# Re-export config
from .config import PlacementConfig

# Re-export models
from .models import (
    Partition,
    PlacedPainting,
    PlacementFailure,
    PlacementResult,
    RandomizeReport,
    WallGap,
)

# Re-export specialized services
from .collision import CollisionDetector
from .layers import classify_layer
from .partitioner import WallPartitioner
from .perspective import PerspectiveScaler
from .randomizer import BulkLayoutService
from .rug_oracle import FloorProjection, PerspectiveRugOracle
from .search import PositionSearch
from .vertical import generate_y_positions

# Re-export main facade
from .placement_facade import FurniturePlacementService

__all__ = [
    # Config
    "PlacementConfig",
    # Models
    "Partition",
    "PlacedPainting",
    "PlacementFailure",
    "PlacementResult",
    "RandomizeReport",
    "WallGap",
    # Specialized services
    "BulkLayoutService",
    "CollisionDetector",
    "FloorProjection",
    "PerspectiveRugOracle",
    "PerspectiveScaler",
    "PositionSearch",
    "WallPartitioner",
    "classify_layer",
    "generate_y_positions",
    # Main facade
    "FurniturePlacementService",
]

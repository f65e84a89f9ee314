"""Domain services for furniture placement."""

from .placement import (
    FloorProjection,
    FurniturePlacementService,
    PerspectiveRugOracle,
    PlacementConfig,
    PlacementFailure,
    PlacementResult,
    RandomizeReport,
)

__all__ = [
    "FloorProjection",
    "FurniturePlacementService",
    "PerspectiveRugOracle",
    "PlacementConfig",
    "PlacementFailure",
    "PlacementResult",
    "RandomizeReport",
]

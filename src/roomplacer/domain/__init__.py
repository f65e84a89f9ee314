"""Domain layer - placement geometry and rules."""

from .catalog import CAT_KIND, DEFAULT_FURNITURE_CONFIGS, FurnitureCatalog
from .services import FurniturePlacementService, PlacementConfig
from .value_objects import (
    PARKED_SENTINEL,
    FloorRect,
    FurnitureBounds,
    FurnitureConfig,
    FurnitureConstraints,
    FurnitureLayer,
    PerspectiveModel,
    RugBounds,
    Transform,
    WallRect,
    WorldBounds,
)

__all__ = [
    "CAT_KIND",
    "DEFAULT_FURNITURE_CONFIGS",
    "FloorRect",
    "FurnitureBounds",
    "FurnitureCatalog",
    "FurnitureConfig",
    "FurnitureConstraints",
    "FurnitureLayer",
    "FurniturePlacementService",
    "PARKED_SENTINEL",
    "PerspectiveModel",
    "PlacementConfig",
    "RugBounds",
    "Transform",
    "WallRect",
    "WorldBounds",
]

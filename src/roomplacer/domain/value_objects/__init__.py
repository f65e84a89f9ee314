"""Value objects for the room placement domain.

This module provides immutable data types used throughout the placement
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Furniture catalog entries
from ._catalog import (
    FurnitureBounds,
    FurnitureConfig,
    FurnitureConstraints,
    FurnitureLayer,
)

# World geometry
from ._geometry import (
    PARKED_SENTINEL,
    FloorRect,
    PerspectiveModel,
    RugBounds,
    Transform,
    WallRect,
    WorldBounds,
)

__all__ = [
    "FloorRect",
    "FurnitureBounds",
    "FurnitureConfig",
    "FurnitureConstraints",
    "FurnitureLayer",
    "PARKED_SENTINEL",
    "PerspectiveModel",
    "RugBounds",
    "Transform",
    "WallRect",
    "WorldBounds",
]

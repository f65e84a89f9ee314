"""Furniture catalog value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FurnitureLayer(str, Enum):
    """Collision layer a furniture kind belongs to.

    The layer is always derived from the catalog entry and never stored
    alongside an entity.

    Attributes:
        RUG: Floor decoration that upright furniture may stand on.
        UPRIGHT: Standing furniture that casts a shadow on the floor.
        WALL: Furniture hung on or pushed against the back wall.
    """

    RUG = "rug"
    UPRIGHT = "upright"
    WALL = "wall"


@dataclass(frozen=True)
class FurnitureBounds:
    """Raw (unscaled) size of a furniture kind in world units.

    Attributes:
        width: Extent along the X axis.
        height: Extent along the Y axis, used for wall-plane collision.
        depth: Extent along the Z axis; how much floor the item covers.
        default_y: Preferred height above the floor for wall items.
    """

    width: float
    height: float
    depth: float
    default_y: float | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.depth < 0:
            raise ValueError("Furniture bounds must be non-negative")


@dataclass(frozen=True)
class FurnitureConstraints:
    """Placement constraints for a furniture kind.

    Attributes:
        wall_mounted: Must be placed against the back wall.
        occupies_floor: Takes up floor space and casts a shadow.
        rotatable: Reserved for rotation support.
        variable_height: May hang at any height between min_y and max_y.
        min_y: Lowest allowed Y for variable-height items.
        max_y: Highest allowed top edge for variable-height items.
    """

    wall_mounted: bool
    occupies_floor: bool
    rotatable: bool = False
    variable_height: bool = False
    min_y: float | None = None
    max_y: float | None = None

    def __post_init__(self) -> None:
        if (
            self.min_y is not None
            and self.max_y is not None
            and self.min_y > self.max_y
        ):
            raise ValueError("min_y must not exceed max_y")


@dataclass(frozen=True)
class FurnitureConfig:
    """Catalog entry describing one furniture kind."""

    kind: str
    bounds: FurnitureBounds
    constraints: FurnitureConstraints
    display_name: str = ""

    def __post_init__(self) -> None:
        if not self.kind:
            raise ValueError("kind must not be empty")

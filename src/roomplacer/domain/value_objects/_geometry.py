"""World geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Transform:
    """Position of an entity in world coordinates.

    Unlike most geometry here, negative coordinates are valid: a transform
    with x < 0 or z < 0 marks an entity that is not currently placed.
    """

    x: float
    y: float
    z: float

    @property
    def is_parked(self) -> bool:
        """True when the entity is parked off the floor and wall."""
        return self.x < 0 or self.z < 0


# Written to every entity at the start of a bulk layout
PARKED_SENTINEL = Transform(x=-9999.0, y=0.0, z=-9999.0)


@dataclass(frozen=True)
class WorldBounds:
    """Extents of the room in world units.

    The back wall sits at wall_z and the floor recedes toward the viewer
    along +Z. The visible_* values bound the area where furniture is laid
    out so it stays on screen.
    """

    min_x: float = 0.0
    max_x: float = 1400.0
    min_z: float = 0.0
    max_z: float = 1200.0
    wall_z: float = 0.0
    floor_y: float = 0.0
    ceiling_y: float = 400.0
    visible_min_x: float = 100.0
    visible_max_x: float = 1300.0
    visible_min_z: float = 50.0
    visible_max_z: float = 800.0

    def __post_init__(self) -> None:
        if self.max_x <= self.min_x:
            raise ValueError("max_x must be greater than min_x")
        if self.max_z <= self.min_z:
            raise ValueError("max_z must be greater than min_z")
        if self.visible_max_x <= self.visible_min_x:
            raise ValueError("visible_max_x must be greater than visible_min_x")
        if self.visible_max_z <= self.visible_min_z:
            raise ValueError("visible_max_z must be greater than visible_min_z")

    @property
    def wall_width(self) -> float:
        """Usable width of the back wall."""
        return self.visible_max_x - self.visible_min_x

    @property
    def width(self) -> float:
        """Total world width."""
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        """Total world depth."""
        return self.max_z - self.min_z


@dataclass(frozen=True)
class PerspectiveModel:
    """Depth-dependent scaling parameters.

    Items at the back wall (z=0) are drawn at min_scale, items at the front
    (z=world_depth) at max_scale, with linear interpolation in between.
    """

    min_scale: float = 0.4
    max_scale: float = 1.9
    world_depth: float = 1200.0

    def __post_init__(self) -> None:
        if self.min_scale <= 0:
            raise ValueError("min_scale must be positive")
        if self.max_scale < self.min_scale:
            raise ValueError("max_scale must not be less than min_scale")
        if self.world_depth <= 0:
            raise ValueError("world_depth must be positive")


@dataclass(frozen=True)
class FloorRect:
    """Axis-aligned rectangle on the floor plane.

    Used both for effective placement bounds and for shadow bounds.
    (x, z) is the corner with the smallest coordinates.
    """

    x: float
    z: float
    width: float
    depth: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_z(self) -> float:
        return self.z + self.depth / 2

    def overlaps(self, other: FloorRect) -> bool:
        """Check if this rectangle overlaps another.

        Rectangles that only touch along an edge do not overlap.
        """
        return not (
            self.x + self.width <= other.x
            or other.x + other.width <= self.x
            or self.z + self.depth <= other.z
            or other.z + other.depth <= self.z
        )


@dataclass(frozen=True)
class WallRect:
    """Axis-aligned rectangle on the wall plane."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def overlaps(self, other: WallRect, x_buffer: float, y_buffer: float) -> bool:
        """Check 2D overlap with another wall rectangle.

        Both axes are widened by their buffer; the rectangles collide only
        when they overlap on X and on Y.

        Args:
            other: The rectangle to test against.
            x_buffer: Minimum horizontal clearance between the two.
            y_buffer: Minimum vertical clearance between the two.

        Returns:
            True if the buffered rectangles overlap on both axes.
        """
        x_overlap = not (
            self.max_x + x_buffer <= other.min_x
            or self.min_x - x_buffer >= other.max_x
        )
        y_overlap = not (
            self.max_y + y_buffer <= other.min_y
            or self.min_y - y_buffer >= other.max_y
        )
        return x_overlap and y_overlap


@dataclass(frozen=True)
class RugBounds:
    """Region in which rug centers may be sampled."""

    min_x: float
    max_x: float
    min_z: float
    max_z: float

"""Rug placement constraints that depend on how the floor is drawn.

A rug is flat, so its world footprint never touches the back wall, but
near the wall its drawn shape can climb above the floor area on screen.
The default oracle here estimates the rug's on-screen top edge from a
simple floor projection and nudges rugs toward the viewer until they stay
on the floor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from roomplacer.domain.value_objects import PerspectiveModel, RugBounds, WorldBounds

from .perspective import PerspectiveScaler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FloorProjection:
    """Screen-space model of the floor area.

    Attributes:
        viewport_height: Height of the game viewport in pixels.
        floor_fraction: Share of the viewport taken by the floor.
    """

    viewport_height: float = 600.0
    floor_fraction: float = 0.4

    def __post_init__(self) -> None:
        if self.viewport_height <= 0:
            raise ValueError("viewport_height must be positive")
        if not 0 < self.floor_fraction <= 1:
            raise ValueError("floor_fraction must be between 0 and 1")

    @property
    def floor_height(self) -> float:
        return self.viewport_height * self.floor_fraction


class PerspectiveRugOracle:
    """Default rug-bounds oracle.

    A rug intrudes on the wall when its drawn top edge,
    ``floor_offset(z) + art_height * scale(z)``, rises above the floor
    height minus a small buffer. floor_offset is the distance of depth z
    from the bottom of the floor area: the full floor height at the wall,
    zero at the front.

    Example:
        >>> oracle = PerspectiveRugOracle()
        >>> oracle.would_rug_go_into_wall(700, 50)
        True
        >>> oracle.find_valid_rug_position(700, 50)
        (700, 950.0)
    """

    RUG_ART_WIDTH = 280.0
    RUG_ART_HEIGHT = 100.0
    WALL_BUFFER = 30.0
    SAFE_MARGIN = 50.0
    MIN_SAFE_Z = 400.0
    SEARCH_STEP = 50.0
    SEARCH_LIMIT_Z = 1000.0
    FALLBACK_Z = 800.0

    def __init__(
        self,
        world: WorldBounds | None = None,
        perspective: PerspectiveModel | None = None,
        projection: FloorProjection | None = None,
    ) -> None:
        self.world = world or WorldBounds()
        self.scaler = PerspectiveScaler(perspective)
        self.projection = projection or FloorProjection()

    def _floor_offset(self, z: float) -> float:
        depth = self.scaler.model.world_depth
        z_normalized = max(0.0, min(1.0, (z - self.world.wall_z) / depth))
        return self.projection.floor_height * (1 - z_normalized)

    def would_rug_go_into_wall(self, x: float, z: float) -> bool:
        """Check if a rug centered at (x, z) would be drawn over the wall."""
        top_edge = self._floor_offset(z) + self.RUG_ART_HEIGHT * self.scaler.scale(z)
        return top_edge > self.projection.floor_height - self.WALL_BUFFER

    def find_valid_rug_position(self, x: float, z: float) -> tuple[float, float]:
        """Move a rug toward the viewer until it stays on the floor.

        Tries z itself, then steps of 50 up to z=1000; if none works the
        rug goes to the fallback depth of 800.
        """
        if not self.would_rug_go_into_wall(x, z):
            return x, z

        test_z = z + self.SEARCH_STEP
        while test_z <= self.SEARCH_LIMIT_Z:
            if not self.would_rug_go_into_wall(x, test_z):
                return x, test_z
            test_z += self.SEARCH_STEP

        logger.debug(f"No safe rug depth found from z={z:.0f}, using fallback")
        return x, self.FALLBACK_Z

    def get_safe_rug_bounds(self) -> RugBounds:
        """Region where rug centers are sampled before correction."""
        return RugBounds(
            min_x=self.world.min_x + self.SAFE_MARGIN,
            max_x=self.world.max_x - self.SAFE_MARGIN,
            min_z=self.MIN_SAFE_Z,
            max_z=self.world.max_z - self.SAFE_MARGIN,
        )

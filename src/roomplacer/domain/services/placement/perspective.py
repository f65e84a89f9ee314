"""Perspective scaling and footprint calculation.

Furniture further from the viewer (smaller z) is drawn smaller, so its
visual footprint on the floor and its width on the wall shrink with depth.
This module turns raw catalog sizes into the depth-scaled rectangles that
the collision detector compares.
"""

from __future__ import annotations

from roomplacer.domain.value_objects import (
    FloorRect,
    FurnitureConfig,
    FurnitureLayer,
    PerspectiveModel,
    WallRect,
)

from .config import PlacementConfig
from .layers import classify_layer


class PerspectiveScaler:
    """Computes depth-scaled sizes and footprints.

    Example:
        >>> scaler = PerspectiveScaler()
        >>> scaler.effective_size(100, 0)
        40.0
        >>> scaler.effective_size(100, 1200)
        190.0
    """

    def __init__(
        self,
        model: PerspectiveModel | None = None,
        config: PlacementConfig | None = None,
    ) -> None:
        self.model = model or PerspectiveModel()
        self.config = config or PlacementConfig()

    def scale(self, z: float) -> float:
        """Visual scale factor at depth z, clamped to the world depth."""
        z_normalized = max(0.0, min(1.0, z / self.model.world_depth))
        return self.model.min_scale + (
            self.model.max_scale - self.model.min_scale
        ) * z_normalized

    def effective_size(self, size: float, z: float) -> float:
        """Size of a raw dimension after perspective scaling at depth z."""
        return size * self.scale(z)

    def shadow_bounds(
        self, kind: str, config: FurnitureConfig | None, x: float, z: float
    ) -> FloorRect:
        """Shadow footprint used for floor collision.

        Rugs use their full effective bounds. Upright furniture casts a
        shadow smaller than its silhouette, which keeps neighbours from
        colliding on visually harmless overlaps.

        Args:
            kind: The furniture kind.
            config: The catalog entry, or None for an unknown kind.
            x: Center X of the item.
            z: Center Z of the item.

        Returns:
            The shadow rectangle centered on (x, z).
        """
        if config is None:
            return FloorRect(x=x, z=z, width=50.0, depth=50.0)

        bounds = config.bounds
        if classify_layer(kind, config) == FurnitureLayer.RUG:
            width = self.effective_size(bounds.width, z)
            depth = self.effective_size(bounds.depth or self.config.rug_min_depth, z)
        else:
            factor = self.config.shadow_factor
            width = self.effective_size(bounds.width * factor, z)
            depth = self.effective_size(
                (bounds.depth or self.config.upright_default_depth) * factor, z
            )

        return FloorRect(x=x - width / 2, z=z - depth / 2, width=width, depth=depth)

    def floor_bounds(self, config: FurnitureConfig, x: float, z: float) -> FloorRect:
        """Full effective footprint of an item on the floor."""
        width = self.effective_size(config.bounds.width, z)
        depth = self.effective_size(config.bounds.depth, z)
        return FloorRect(x=x - width / 2, z=z - depth / 2, width=width, depth=depth)

    def wall_rect(self, config: FurnitureConfig, x: float, y: float, z: float) -> WallRect:
        """Footprint of a wall item on the wall plane.

        Width is perspective-scaled; height is a vertical screen measure and
        stays raw.
        """
        width = self.effective_size(config.bounds.width, z)
        return WallRect(
            min_x=x - width / 2,
            max_x=x + width / 2,
            min_y=y,
            max_y=y + config.bounds.height,
        )

    def conservative_wall_rect(
        self, config: FurnitureConfig, x: float, y: float, z: float
    ) -> WallRect:
        """Wall footprint using the larger of raw and effective width.

        Never smaller than wall_rect, so a test that passes with these
        rectangles also passes with the exact ones.
        """
        width = max(config.bounds.width, self.effective_size(config.bounds.width, z))
        return WallRect(
            min_x=x - width / 2,
            max_x=x + width / 2,
            min_y=y,
            max_y=y + config.bounds.height,
        )

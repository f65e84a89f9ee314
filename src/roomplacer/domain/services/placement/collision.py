"""Collision detection for furniture placement.

This module provides the CollisionDetector, which answers whether an item
may occupy a proposed position. Three collision regimes apply, selected by
the layers of the two items involved:

- Rug vs rug: shadow rectangles must not overlap.
- Upright vs upright: shadow rectangles must not overlap.
- Wall vs wall: buffered 2D overlap on the wall plane.

Rugs and upright furniture never collide with each other (furniture may
stand on a rug), and wall items are never checked against floor items.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from typing import TYPE_CHECKING

from roomplacer.domain.catalog import CAT_KIND
from roomplacer.domain.value_objects import (
    FloorRect,
    FurnitureConfig,
    FurnitureLayer,
    Transform,
    WorldBounds,
)

from .config import PlacementConfig
from .layers import classify_layer
from .models import PlacementResult
from .perspective import PerspectiveScaler

if TYPE_CHECKING:
    from roomplacer.contracts import EntityStoreProtocol, FurnitureCatalogProtocol

logger = logging.getLogger(__name__)

__all__ = ["CollisionDetector"]


class CollisionDetector:
    """Validates proposed furniture positions against the current room.

    Attributes:
        store: Entity store holding transforms and kinds.
        catalog: Furniture catalog.
        world: World bounds.
        scaler: Perspective scaler used for every footprint.
        config: Placement configuration.
    """

    def __init__(
        self,
        store: EntityStoreProtocol,
        catalog: FurnitureCatalogProtocol,
        world: WorldBounds,
        scaler: PerspectiveScaler,
        config: PlacementConfig,
    ) -> None:
        self.store = store
        self.catalog = catalog
        self.world = world
        self.scaler = scaler
        self.config = config

    def get_layer(self, kind: str) -> FurnitureLayer:
        """Collision layer of a furniture kind."""
        return classify_layer(kind, self.catalog.get(kind))

    def placed_entities(
        self, exclude_id: str | None = None
    ) -> Iterator[tuple[str, str, Transform]]:
        """Yield (entity_id, kind, transform) for furniture currently placed.

        Cats, the excluded entity, entities without a transform and parked
        entities are skipped. Ids are snapshotted first so callers may write
        transforms while iterating.
        """
        for entity_id, kind in list(self.store.kinds.items()):
            if kind == CAT_KIND:
                continue
            if exclude_id is not None and entity_id == exclude_id:
                continue
            transform = self.store.transforms.get(entity_id)
            if transform is None or transform.is_parked:
                continue
            yield entity_id, kind, transform

    def placed_wall_items(
        self, exclude_id: str | None = None
    ) -> Iterator[tuple[str, FurnitureConfig, Transform]]:
        """Yield placed wall-mounted items with their catalog entries."""
        for entity_id, kind, transform in self.placed_entities(exclude_id):
            config = self.catalog.get(kind)
            if config is not None and config.constraints.wall_mounted:
                yield entity_id, config, transform

    def can_place_furniture(
        self,
        kind: str,
        position: Transform,
        exclude_id: str | None = None,
    ) -> PlacementResult:
        """Check if a furniture kind may occupy a position.

        Checks, in order: the kind is known, the raw footprint lies inside
        the world, wall-mounted items sit exactly on the wall, and the item
        does not collide with placed furniture on its layer.

        Args:
            kind: The furniture kind to place.
            position: The proposed transform (x and z are the item center).
            exclude_id: Entity to ignore, typically the item being moved.

        Returns:
            A successful result carrying the position, or a failure with
            the reason.
        """
        config = self.catalog.get(kind)
        if config is None:
            return PlacementResult.fail(f"Unknown furniture type: {kind}")

        bounds = config.bounds
        constraints = config.constraints

        min_x = position.x - bounds.width / 2
        max_x = position.x + bounds.width / 2
        min_z = position.z - bounds.depth / 2
        max_z = position.z + bounds.depth / 2

        if min_x < self.world.min_x or max_x > self.world.max_x:
            return PlacementResult.fail("Outside world X boundaries")
        if min_z < self.world.min_z or max_z > self.world.max_z:
            return PlacementResult.fail("Outside world Z boundaries")

        if constraints.wall_mounted:
            tolerance = self.config.wall_tolerance
            if constraints.occupies_floor:
                # Back edge against the wall
                if not math.isclose(
                    max_z, self.world.wall_z + bounds.depth, rel_tol=0.0, abs_tol=tolerance
                ):
                    return PlacementResult.fail(
                        "Wall-adjacent furniture must be against the wall"
                    )
            elif not math.isclose(
                position.z, self.world.wall_z, rel_tol=0.0, abs_tol=tolerance
            ):
                return PlacementResult.fail("Wall-mounted items must be on the wall")

        layer = classify_layer(kind, config)
        if layer == FurnitureLayer.WALL:
            result = self._check_wall_collision(config, position, exclude_id)
        else:
            result = self._check_floor_collision(kind, config, layer, position, exclude_id)
        if not result.success:
            return result

        return PlacementResult.ok(position)

    def _check_floor_collision(
        self,
        kind: str,
        config: FurnitureConfig,
        layer: FurnitureLayer,
        position: Transform,
        exclude_id: str | None,
    ) -> PlacementResult:
        """Shadow-based collision for rugs and upright furniture.

        Each layer only collides with its own layer.
        """
        proposed = self.scaler.shadow_bounds(kind, config, position.x, position.z)

        for _, existing_kind, transform in self.placed_entities(exclude_id):
            existing_config = self.catalog.get(existing_kind)
            if classify_layer(existing_kind, existing_config) != layer:
                continue

            existing = self.scaler.shadow_bounds(
                existing_kind, existing_config, transform.x, transform.z
            )
            if proposed.overlaps(existing):
                if layer == FurnitureLayer.RUG:
                    return PlacementResult.fail(
                        f"Rug would overlap with existing {existing_kind}"
                    )
                return PlacementResult.fail(
                    f"Shadow would overlap with existing {existing_kind}"
                )

        return PlacementResult.ok(position)

    def _check_wall_collision(
        self,
        config: FurnitureConfig,
        position: Transform,
        exclude_id: str | None,
    ) -> PlacementResult:
        """2D collision between wall items on the wall plane."""
        proposed = self.scaler.wall_rect(config, position.x, position.y, position.z)

        for _, existing_config, transform in self.placed_wall_items(exclude_id):
            existing = self.scaler.wall_rect(
                existing_config, transform.x, transform.y, transform.z
            )
            if proposed.overlaps(
                existing, self.config.wall_x_buffer, self.config.wall_y_buffer
            ):
                return PlacementResult.fail(
                    f"Would overlap with existing {existing_config.kind} on wall"
                )

        return PlacementResult.ok(position)

    def get_furniture_floor_bounds(self, entity_id: str) -> FloorRect | None:
        """Effective floor footprint of an entity that occupies floor space.

        Returns:
            The footprint, or None if the entity has no transform, is
            unknown, or does not occupy the floor.
        """
        transform = self.store.transforms.get(entity_id)
        kind = self.store.kinds.get(entity_id)
        config = self.catalog.get(kind) if kind is not None else None
        if transform is None or config is None or not config.constraints.occupies_floor:
            return None
        return self.scaler.floor_bounds(config, transform.x, transform.z)

    def get_occupied_spaces(self) -> list[FloorRect]:
        """Effective floor footprints of all placed floor-occupying items."""
        spaces: list[FloorRect] = []
        for entity_id, _, _ in self.placed_entities():
            bounds = self.get_furniture_floor_bounds(entity_id)
            if bounds is not None:
                spaces.append(bounds)
        return spaces

    def can_cat_move_to(self, x: float, z: float, radius: float = 30.0) -> bool:
        """Check if a cat-sized square at (x, z) is free of floor furniture."""
        cat_bounds = FloorRect(x=x - radius, z=z - radius, width=radius * 2, depth=radius * 2)
        for occupied in self.get_occupied_spaces():
            if cat_bounds.overlaps(occupied):
                logger.debug(f"Cat blocked at ({x:.0f}, {z:.0f})")
                return False
        return True

"""Facade for the furniture placement engine.

This module provides FurniturePlacementService, the single entry point a
host uses to validate, search for and randomize furniture positions. It
wires the collision detector, position search, wall partitioner and bulk
layout service around one injected entity store and random source.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from roomplacer.domain.catalog import FurnitureCatalog
from roomplacer.domain.value_objects import (
    FloorRect,
    FurnitureLayer,
    PerspectiveModel,
    Transform,
    WorldBounds,
)

from .collision import CollisionDetector
from .config import PlacementConfig
from .models import PlacementResult, RandomizeReport
from .partitioner import WallPartitioner
from .perspective import PerspectiveScaler
from .randomizer import BulkLayoutService
from .rug_oracle import PerspectiveRugOracle
from .search import PositionSearch
from .vertical import generate_y_positions

if TYPE_CHECKING:
    from roomplacer.contracts import (
        EntityStoreProtocol,
        FurnitureCatalogProtocol,
        RandomSourceProtocol,
        RugBoundsOracleProtocol,
    )

logger = logging.getLogger(__name__)

__all__ = ["FurniturePlacementService"]


class FurniturePlacementService:
    """Validates and chooses furniture positions in a 2.5D room.

    The service borrows the entity store: it reads kinds, and reads and
    writes transforms. It holds no other state between calls.

    Example:
        >>> import random
        >>> from roomplacer.infrastructure import World
        >>> world = World()
        >>> world.add_entity("couch-1", "couch")
        >>> service = FurniturePlacementService(world, rng=random.Random(7))
        >>> service.find_random_valid_position("couch").success
        True
    """

    def __init__(
        self,
        store: EntityStoreProtocol,
        catalog: FurnitureCatalogProtocol | None = None,
        world: WorldBounds | None = None,
        perspective: PerspectiveModel | None = None,
        config: PlacementConfig | None = None,
        rng: RandomSourceProtocol | None = None,
        rug_oracle: RugBoundsOracleProtocol | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            store: Entity store holding transforms and kinds.
            catalog: Furniture catalog. Defaults to the built-in inventory.
            world: World bounds. Defaults to the standard room.
            perspective: Perspective model. Defaults to the standard model.
            config: Placement tunables.
            rng: Random source. Defaults to an unseeded random.Random.
            rug_oracle: Rug bounds oracle. Defaults to PerspectiveRugOracle.
        """
        self.store = store
        self.catalog = catalog if catalog is not None else FurnitureCatalog()
        self.world = world or WorldBounds()
        self.perspective = perspective or PerspectiveModel()
        self.config = config or PlacementConfig()
        self.rng = rng if rng is not None else random.Random()
        self.rug_oracle = rug_oracle or PerspectiveRugOracle(self.world, self.perspective)

        self.scaler = PerspectiveScaler(self.perspective, self.config)
        self.detector = CollisionDetector(
            self.store, self.catalog, self.world, self.scaler, self.config
        )
        self.search = PositionSearch(self.detector, self.rng, self.rug_oracle)
        self.partitioner = WallPartitioner(self.search)
        self.bulk = BulkLayoutService(self.search, self.partitioner)

    def can_place_furniture(
        self, kind: str, position: Transform, exclude_id: str | None = None
    ) -> PlacementResult:
        """Check if a kind may occupy a position.

        Args:
            kind: Furniture kind.
            position: Proposed transform.
            exclude_id: Entity to ignore, usually the one being moved.

        Returns:
            Success with the position, or failure with a reason.
        """
        return self.detector.can_place_furniture(kind, position, exclude_id)

    def find_random_valid_position(
        self, kind: str, max_attempts: int | None = None
    ) -> PlacementResult:
        """Search for a random valid position for a kind."""
        return self.search.find_random_valid_position(kind, max_attempts)

    def randomize_all_furniture(self) -> RandomizeReport:
        """Lay out every furniture entity in the store from scratch."""
        return self.bulk.randomize_all_furniture()

    def can_cat_move_to(self, x: float, z: float, radius: float = 30.0) -> bool:
        return self.detector.can_cat_move_to(x, z, radius)

    def get_furniture_layer(self, kind: str) -> FurnitureLayer:
        return self.detector.get_layer(kind)

    def get_shadow_bounds(self, kind: str, x: float, z: float) -> FloorRect:
        """Shadow footprint of a kind centered at (x, z), for renderers."""
        return self.scaler.shadow_bounds(kind, self.catalog.get(kind), x, z)

    def get_furniture_floor_bounds(self, entity_id: str) -> FloorRect | None:
        return self.detector.get_furniture_floor_bounds(entity_id)

    def get_occupied_spaces(self) -> list[FloorRect]:
        return self.detector.get_occupied_spaces()

    def get_effective_size(self, size: float, z: float) -> float:
        return self.scaler.effective_size(size, z)

    def generate_y_positions(self, kind: str) -> list[float]:
        """Y candidates for a kind, in the order the search tries them.

        Returns:
            The candidate list; empty for unknown kinds.
        """
        config = self.catalog.get(kind)
        if config is None:
            return []
        if not config.constraints.variable_height:
            return [config.bounds.default_y or 0.0]
        return generate_y_positions(config.bounds, config.constraints, self.rng, self.config)
